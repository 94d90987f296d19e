# store/domain/errors.py


class EmptyCartError(ValueError):
    """Checkout na pustym koszyku - blad do pokazania uzytkownikowi, koszyk bez zmian."""

    def __init__(self, message: str = "Koszyk jest pusty. Nie mozna przejsc do platnosci."):
        super().__init__(message)
