"""Lazy combinatorial sequence generators."""

from .base import (
    SequenceGenerator, ScalarGenerator, ArrayGenerator,
    register_generator, get_generator, list_generators, generator_exists,
    create_generator, get_generator_info, GENERATOR_REGISTRY
)
from .errors import SequenceError, InvalidParameter, ExhaustedSequence

# Import all generators to trigger registration
from .bit_tuple import BitTupleGenerator
from .combination import CombinationGenerator
from .gray_code import GrayCodeGenerator
from .mixed_radix import MixedRadixGenerator
from .permutation import PermutationGenerator

__all__ = [
    'SequenceGenerator', 'ScalarGenerator', 'ArrayGenerator',
    'register_generator', 'get_generator', 'list_generators',
    'generator_exists', 'create_generator', 'get_generator_info',
    'GENERATOR_REGISTRY',
    'SequenceError', 'InvalidParameter', 'ExhaustedSequence',
    # Generator classes
    'BitTupleGenerator', 'CombinationGenerator', 'GrayCodeGenerator',
    'MixedRadixGenerator', 'PermutationGenerator',
]
