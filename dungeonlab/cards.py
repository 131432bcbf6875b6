"""Playing cards with polymorphic descriptions."""

from __future__ import annotations

_FACES = {11: "J", 12: "Q", 13: "K", 14: "A"}
_LABELS = {v: str(v) for v in range(2, 11)} | _FACES


class Card:
    """A card with a value; colour and suit are unknown.

    Values 2-10 are number cards, 11-14 are J, Q, K, A; anything else is unknown.
    """

    def __init__(self, value: int = 0) -> None:
        self.value = value
        self.color = "unknown"
        self.suit = "U"

    def description(self) -> str:
        """Describe the card's value."""
        return "Value = " + _LABELS.get(self.value, "?")

    def __str__(self) -> str:
        return self.description()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value!r})"


class RedCard(Card):
    """A red card of unknown suit."""

    def __init__(self, value: int = 0) -> None:
        super().__init__(value)
        self.color = "red"

    def description(self) -> str:
        """Describe the card's value and colour."""
        return f"{Card.description(self)} Color: {self.color} "


class BlackCard(Card):
    """A black card of unknown suit."""

    def __init__(self, value: int = 0) -> None:
        super().__init__(value)
        self.color = "black"

    def description(self) -> str:
        """Describe the card's value and colour."""
        return f"{Card.description(self)} Color: {self.color} "


class Heart(RedCard):
    """A red heart."""

    def __init__(self, value: int = 0) -> None:
        super().__init__(value)
        self.suit = "H"

    def description(self) -> str:
        """Describe the card's value, colour and suit."""
        return f"{RedCard.description(self)} Suit: {self.suit}"


class Diamond(RedCard):
    """A red diamond."""

    def __init__(self, value: int = 0) -> None:
        super().__init__(value)
        self.suit = "D"

    def description(self) -> str:
        """Describe the card's value, colour and suit."""
        return f"{RedCard.description(self)} Suit: {self.suit}"


class Club(BlackCard):
    """A black club."""

    def __init__(self, value: int = 0) -> None:
        super().__init__(value)
        self.suit = "C"

    def description(self) -> str:
        """Describe the card's value, colour and suit."""
        return f"{BlackCard.description(self)} Suit: {self.suit}"


class Spade(BlackCard):
    """A black spade."""

    def __init__(self, value: int = 0) -> None:
        super().__init__(value)
        self.suit = "S"

    def description(self) -> str:
        """Describe the card's value, colour and suit."""
        return f"{BlackCard.description(self)} Suit: {self.suit}"