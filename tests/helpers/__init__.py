"""Test helpers module for shared test utilities.

- constants: Sampled decimal operands
- reference: Exact results from the standard library decimal module
"""

from tests.helpers.constants import SAMPLE_PAIRS, SAMPLE_TRIPLES, SAMPLE_VALUES
from tests.helpers.reference import reference

__all__ = [
    # Constants
    "SAMPLE_VALUES",
    "SAMPLE_PAIRS",
    "SAMPLE_TRIPLES",
    # Reference results
    "reference",
]
