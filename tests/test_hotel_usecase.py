import pytest

from hotelbooking.errs import NotFoundError
from hotelbooking.models import Hotel
from hotelbooking.paging import Paging
from hotelbooking.reservation.hotel_usecase import HotelUseCase
from hotelbooking.uuider import UUIDer

GENERATED = "a3c1f0d2-0000-4000-8000-00000000abcd"
GIVEN = "049161bb-badd-4fa8-9d90-87c9a82b0668"


class FixedUUIDer(UUIDer):
    def __init__(self):
        self.calls = 0

    def generate(self):
        self.calls += 1
        return GENERATED


class FailingUUIDer(UUIDer):
    def generate(self):
        raise ValueError("invalid generated uuid")


class RecordingRepo:
    def __init__(self):
        self.calls = []
        self.hotel = Hotel(id=1, name="Ararat Park", hotel_uid=GIVEN)

    def create(self, hotel):
        self.calls.append(("create", hotel))
        return hotel

    def get_all_paged(self, paging):
        self.calls.append(("paged", paging))
        return [self.hotel]

    def get_by_id(self, hotel_id):
        self.calls.append(("id", hotel_id))
        if hotel_id != self.hotel.id:
            raise NotFoundError()
        return self.hotel

    def get_by_uid(self, uid):
        self.calls.append(("uid", uid))
        if uid != self.hotel.hotel_uid:
            raise NotFoundError()
        return self.hotel


def test_create_generates_uid_when_missing():
    uuider = FixedUUIDer()
    use_case = HotelUseCase(RecordingRepo(), uuider)
    created = use_case.create(Hotel(name="Volga"))
    assert created.hotel_uid == GENERATED
    assert created.name == "Volga"
    assert uuider.calls == 1


def test_create_keeps_given_uid():
    repo = RecordingRepo()
    use_case = HotelUseCase(repo, FailingUUIDer())
    created = use_case.create(Hotel(name="Volga", hotel_uid=GIVEN))
    assert created.hotel_uid == GIVEN
    assert repo.calls == [("create", Hotel(name="Volga", hotel_uid=GIVEN))]


def test_create_propagates_uuid_failure():
    repo = RecordingRepo()
    with pytest.raises(ValueError):
        HotelUseCase(repo, FailingUUIDer()).create(Hotel(name="Volga"))
    assert repo.calls == []


def test_get_all_paged_passes_paging():
    repo = RecordingRepo()
    paging = Paging(limit=3, offset=6)
    assert HotelUseCase(repo, FixedUUIDer()).get_all_paged(paging) == [repo.hotel]
    assert repo.calls == [("paged", paging)]


def test_get_by_id_and_uid():
    repo = RecordingRepo()
    use_case = HotelUseCase(repo, FixedUUIDer())
    assert use_case.get_by_id(1) is repo.hotel
    assert use_case.get_by_uid(GIVEN) is repo.hotel
    with pytest.raises(NotFoundError):
        use_case.get_by_id(2)
    with pytest.raises(NotFoundError):
        use_case.get_by_uid("other")