from domain.annotations.label import (
    COMPARISON_LABEL,
    get_labels,
    has_label,
    label,
    labelled_field,
    labelled_fields,
)

__all__ = [
    "COMPARISON_LABEL",
    "get_labels",
    "has_label",
    "label",
    "labelled_field",
    "labelled_fields",
]
