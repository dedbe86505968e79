from .errors import (
    EzUtilitiesError, NullSequenceError, OutOfRangeError,
    DuplicateSelectionError, NotFoundError
)
from .rearrange import (
    SequenceRearranger, rearrange_by_value, rearrange_by_index,
    move_single, move_single_index
)
from .config import configure, get_config, load_config, reset_config
from .random_utils import RandomSource, set_seed, seeded

__version__ = "0.1.0"
