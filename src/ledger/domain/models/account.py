"""Account domain model."""

from dataclasses import dataclass, field

from ledger.core.exceptions import ValidationError

# Sentinel id: the repository assigns the next free id on insert.
UNASSIGNED_ID = 0


@dataclass
class Account:
    """
    A single ledger entry.

    An ``account_id`` of ``UNASSIGNED_ID`` asks the repository to pick one.
    Names need not be unique and balances may go negative.

    Ids and balances are checked on every assignment, not only at
    construction. While a repository holds the account its id is pinned:
    reassigning it raises ``ValidationError``.
    """

    account_id: int
    name: str
    balance: float = 0.0
    _id_pinned: bool = field(default=False, init=False, repr=False, compare=False)

    def __setattr__(self, name: str, value: object) -> None:
        if name == "account_id":
            if getattr(self, "_id_pinned", False):
                raise ValidationError(
                    f"Account ID {self.account_id} cannot change while the account is stored"
                )
            _check_account_id(value)
        elif name == "balance" and isinstance(value, int) and not isinstance(value, bool):
            value = float(value)
        super().__setattr__(name, value)

    def pin_id(self) -> None:
        """Forbid id changes; called by the repository that stores the account."""
        object.__setattr__(self, "_id_pinned", True)

    def unpin_id(self) -> None:
        """Allow id changes again once the account leaves its repository."""
        object.__setattr__(self, "_id_pinned", False)

    @property
    def is_assigned(self) -> bool:
        """Whether the account carries an explicit id."""
        return self.account_id != UNASSIGNED_ID


def _check_account_id(value: object) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"Account ID must be an integer, got {value!r}")
    if value < 0:
        raise ValidationError(f"Account ID must not be negative, got {value}")
