"""Payment business rules."""

from collections.abc import Collection
from dataclasses import replace

from ..models import Payment
from ..uuider import UUIDer


class PaymentUseCase:
    """Creates, updates, looks up and deletes payments."""

    def __init__(self, repo, uuider: UUIDer) -> None:
        self._repo = repo
        self._uuider = uuider

    def create(self, payment: Payment) -> Payment:
        """Store a payment under a freshly generated payment uid."""
        return self._repo.create(replace(payment, payment_uid=self._uuider.generate()))

    def update(self, payment: Payment, fields: Collection[str]) -> Payment:
        return self._repo.update(payment, fields)

    def get_by_payment_uid(self, payment_uid: str) -> Payment:
        return self._repo.get_by_payment_uid(payment_uid)

    def delete(self, payment_uid: str) -> None:
        self._repo.delete(payment_uid)