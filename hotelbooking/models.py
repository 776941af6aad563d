"""Domain records of the booking services."""

from dataclasses import dataclass


@dataclass
class Loyalty:
    id: int = 0
    reservation_count: int = 0
    discount: int = 0
    status: str = ""
    username: str = ""


@dataclass
class Payment:
    id: int = 0
    price: int = 0
    status: str = ""
    payment_uid: str = ""


@dataclass
class Hotel:
    id: int = 0
    stars: int = 0
    price: int = 0
    name: str = ""
    country: str = ""
    address: str = ""
    city: str = ""
    hotel_uid: str = ""


@dataclass
class Reservation:
    id: int = 0
    hotel_id: int = 0
    username: str = ""
    status: str = ""
    reservation_uid: str = ""
    payment_uid: str = ""
    start_date: str = ""
    end_date: str = ""