"""Document prototypes registered at startup."""
from typing import Callable, Dict

from src.domain.document.aggregate import Document


def _report() -> Document:
    return Document(
        title="Report",
        content="Summary\n\nFindings\n\nRecommendations",
        formatting={"font": "Helvetica", "size": 11, "margins": [2.5, 2.5, 2.5, 2.5]},
        tags={"report"},
    )


def _letter() -> Document:
    return Document(
        title="Letter",
        content="Dear ,\n\nSincerely,",
        formatting={"font": "Times New Roman", "size": 12, "letterhead": True},
        tags={"letter"},
    )


def _blank() -> Document:
    return Document(title="Untitled")


DEFAULT_PROTOTYPES: Dict[str, Callable[[], Document]] = {
    "blank": _blank,
    "report": _report,
    "letter": _letter,
}
