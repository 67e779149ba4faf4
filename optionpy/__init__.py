from .errors import OptionError, InvalidArgument, IllegalState, InvalidCast
from .option import Option, Some, NONE, from_nullable, to_option, of, empty
from .result import Result, Ok, Err, from_option as result_from_option
from .logger import ConsoleLogger
from . import combinators
from .combinators import sequence, first_some, flatten, trace
