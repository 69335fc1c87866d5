"""Element pipeline — route single elements and process batches.

process_element normalizes one element and raises on malformed input.
process_elements folds it over a list, turning each failure into an
indexed error string so one broken element never sinks the batch:

    {"processed": [<normalized>, ...],
     "errors": ["Element 2: Component elements require a component ID"]}
"""

from collections.abc import Iterator, Mapping

from .normalizers import process_basic_element
from .registry import get_processor


NOT_AN_ARRAY_ERROR = "Elements must be an array"


def process_element(element) -> dict:
    """Normalize one raw element via the registry.

    Tags without a registered normalizer fall through to the basic
    normalizer, so element types added to the API later still get
    grouped settings flattened.

    Raises:
        ValueError: Element is None, not a mapping, or has no type;
            or the type's normalizer rejected it.
    """
    if not isinstance(element, Mapping) or not element.get("type"):
        raise ValueError("Element must have a type property")

    processor = get_processor(element["type"]) or process_basic_element
    return processor(dict(element))


def iter_processed(elements) -> Iterator[tuple[int, dict | None, str | None]]:
    """Yield (1-based position, normalized element or None, error or None)."""
    for position, element in enumerate(elements, start=1):
        try:
            yield position, process_element(element), None
        except (ValueError, TypeError) as e:
            yield position, None, str(e)


def process_elements(elements) -> dict:
    """Normalize every element of a list, collecting per-element errors.

    Returns:
        {"processed": [...], "errors": [...]}. processed keeps the input
        order of the elements that succeeded; errors read
        "Element <1-based position>: <message>".
    """
    if not isinstance(elements, (list, tuple)):
        return {"processed": [], "errors": [NOT_AN_ARRAY_ERROR]}

    processed = []
    errors = []
    for position, element, error in iter_processed(elements):
        if error is not None:
            errors.append(f"Element {position}: {error}")
        else:
            processed.append(element)
    return {"processed": processed, "errors": errors}
