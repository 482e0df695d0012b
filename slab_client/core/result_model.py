"""
Производные значения результата оптимизации для отображения
"""

from dataclasses import dataclass
from typing import List

from .schemas import OptimizationResult

ALL_UNFIT_REASON = "All requested pieces were unfit. Try larger slabs."
NO_LAYOUTS_REASON = "No layouts generated yet. Run optimization to see results."


@dataclass(frozen=True)
class LayoutItem:
    """Раскладка одного слэба"""
    index: int
    reference: str

    @property
    def title(self) -> str:
        return f"Slab Layout {self.index + 1}"

    @property
    def filename(self) -> str:
        return f"slab-layout-{self.index + 1}.png"


@dataclass(frozen=True)
class ResultModel:
    """Представление результата; пересчитывается при каждой отрисовке"""
    result: OptimizationResult

    @property
    def slab_used(self) -> int:
        return self.result.slab_used

    @property
    def unfit_count(self) -> int:
        return len(self.result.unfitted_piece_ids)

    @property
    def has_layouts(self) -> bool:
        return len(self.result.images) > 0

    @property
    def all_fit(self) -> bool:
        return self.has_layouts and self.unfit_count == 0

    @property
    def no_layouts_reason(self) -> str:
        if self.unfit_count > 0 and not self.has_layouts:
            return ALL_UNFIT_REASON
        return NO_LAYOUTS_REASON

    @property
    def unfit_summary(self) -> str:
        return "Unfit piece IDs: " + ", ".join(self.result.unfitted_piece_ids)

    @property
    def layouts(self) -> List[LayoutItem]:
        return [LayoutItem(index, reference) for index, reference in enumerate(self.result.images)]
