class RepoError(Exception):
    """Base class for repository-level errors."""

    pass


# ------------------------- CART -------------------------


class CartRepoError(RepoError):
    """Generic cart error, e.g. a sets update on a cardio item."""

    pass


class CartItemNotFoundError(CartRepoError):
    """Raised when no cart item has the given id."""

    pass


# ------------------------- PROFILE -------------------------
class ProfileRepoError(RepoError):
    pass
