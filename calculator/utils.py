import enum


class PrintableEnum(enum.Enum):
    def __str__(self) -> str:
        return self.name

    __repr__ = __str__


def div_toward_zero(a: int, b: int) -> int:
    """Integer division truncating toward zero (Python's // floors)"""
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient
