from typing import Any, Iterable, List, Optional, Sequence

from admissions.core.models import SymbolPointRule, read_field


class PointsCalculator:
    """
    Maps (exam_level, symbol) pairs to points using an organization's
    symbol-points table.

    Lookup is exact string equality on both keys. The table is expected to
    hold one row per pair; with duplicates the first row in table order wins,
    so callers should pass it in the order their repository lists it.
    """

    def __init__(self, symbol_points: Optional[Iterable[SymbolPointRule]] = None):
        self.symbol_points: List[SymbolPointRule] = [
            r if isinstance(r, SymbolPointRule) else SymbolPointRule.from_dict(r)
            for r in (symbol_points or [])
        ]

    def lookup(self, exam_level: str, symbol: str) -> Optional[SymbolPointRule]:
        for rule in self.symbol_points:
            if rule.exam_level == exam_level and rule.symbol == symbol:
                return rule
        return None

    def points_for(self, subject: Any) -> float:
        rule = self.lookup(read_field(subject, "exam_level"), read_field(subject, "symbol"))
        if rule is None:
            return 0
        return rule.points or 0

    def calculate(self, subjects: Sequence[Any]) -> float:
        if not self.symbol_points or not subjects:
            return 0
        return sum(self.points_for(s) for s in subjects)


def calculate_points(subjects: Sequence[Any], symbol_points: Optional[Iterable[SymbolPointRule]]) -> float:
    return PointsCalculator(symbol_points).calculate(subjects)
