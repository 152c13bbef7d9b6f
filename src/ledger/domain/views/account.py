"""Read-only views over stored accounts."""

from ledger.domain.models.account import Account


class AccountView:
    """
    Live, read-only window onto an account owned by a repository.

    The view holds a reference to the stored record rather than a copy, so
    it always shows the current values. Assigning to any attribute raises
    ``AttributeError``.
    """

    __slots__ = ("_account",)

    def __init__(self, account: Account):
        object.__setattr__(self, "_account", account)

    @property
    def account_id(self) -> int:
        return self._account.account_id

    @property
    def name(self) -> str:
        return self._account.name

    @property
    def balance(self) -> float:
        return self._account.balance

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"AccountView is read-only (tried to set {name!r})")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"AccountView is read-only (tried to delete {name!r})")

    def _fields(self) -> tuple[int, str, float]:
        return (self.account_id, self.name, self.balance)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, (AccountView, Account)):
            return self._fields() == (other.account_id, other.name, other.balance)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"AccountView(account_id={self.account_id}, "
            f"name={self.name!r}, balance={self.balance})"
        )
