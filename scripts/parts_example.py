"""Builds the parts relvar from the suppliers-and-parts example and sums part weights."""
import logging

from relvar import Relvar, ValidationError
from relvar.types import parts_attributes

logger = logging.getLogger(__name__)


def main():
    logging.basicConfig(level=logging.INFO)
    parts = Relvar(parts_attributes(), name="P")

    # Attributes may come in any order and any case; values need not be strings.
    parts.add([
        ("PNO", "P1"),
        ("color", "Red"),
        ("PName", "Nut"),
        ("WEIGHT", 12.0),
        ("city", "London"),
    ])
    # COLOR is defaulted.
    parts.add({"PNO": "P2", "PNAME": "Bolt", "WEIGHT": "17.0", "CITY": "Paris"})

    try:
        parts.add({"PNAME": "Screw", "COLOR": "Blue", "WEIGHT": "17.0", "CITY": "Oslo"})
    except ValidationError as e:
        logger.warning(f"Rejected part without a part number: {e}")

    try:
        parts.add({"PNO": "S4", "PNAME": "Screw", "COLOR": "Red", "WEIGHT": None, "CITY": "London"})
    except ValidationError as e:
        logger.warning(f"Rejected invalid part: {e}")

    total_weight = sum(t["weight"] for t in parts)
    logger.info(f"Total weight of parts is: {total_weight}")
    print(parts.to_dataframe(serialize=True).to_string(index=False))
    assert total_weight == 29


if __name__ == "__main__":
    main()
