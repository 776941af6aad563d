"""Reservation service: hotels and the reservations made in them."""