"""Exceptions raised by windaction."""


class InvalidArgumentError(ValueError):
    """An input lies outside the domain allowed by SANS 10160-3."""


__all__ = ["InvalidArgumentError"]
