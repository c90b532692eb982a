import pytest
import sys
from pathlib import Path

# Add src to sys.path so we can import igcse_toolkit
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from igcse_toolkit.builder.layout import LayoutConfig, LayoutEngine, PageCanvas  # noqa: E402
from igcse_toolkit.core.models import (  # noqa: E402
    AppliedPart,
    Category,
    QuestionPart,
    SelectionPlan,
    StructuredQuestion,
)


# Common test fixtures
@pytest.fixture
def layout_config():
    """Default A4 layout."""
    return LayoutConfig()


@pytest.fixture
def engine(layout_config):
    """Layout engine over a fresh one-page canvas with a running header."""
    canvas = PageCanvas(layout_config.page_width, layout_config.page_height)
    return LayoutEngine(canvas, layout_config, header_left="0653/21", header_right="M/2025")


@pytest.fixture
def make_question():
    """Factory: structured question with one line part per mark value."""
    def _make(number, category, *marks):
        parts = tuple(QuestionPart(f"Part worth {m}.", marks=m) for m in marks)
        return StructuredQuestion(number=number, category=category, parts=parts)
    return _make


@pytest.fixture
def make_plan():
    """Factory: plan applying every given part with its full declared marks."""
    def _make(*parts, number="1", category=Category.PHYSICS):
        question = StructuredQuestion(number=number, category=category, parts=tuple(parts))
        return SelectionPlan(
            question=question,
            display_number=number,
            parts=tuple(AppliedPart(p, p.mark_value) for p in parts),
        )
    return _make
