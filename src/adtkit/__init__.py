from adtkit import either as either
from adtkit import option as option
from adtkit import remote_data as remote_data
from adtkit.either import Either as Either
from adtkit.either import Left as Left
from adtkit.either import Right as Right
from adtkit.errors import AdtError as AdtError
from adtkit.errors import NonExhaustiveMatchError as NonExhaustiveMatchError
from adtkit.errors import SealedVariantError as SealedVariantError
from adtkit.errors import UnknownVariantError as UnknownVariantError
from adtkit.errors import UnwrapError as UnwrapError
from adtkit.matching import Matcher as Matcher
from adtkit.matching import Variant as Variant
from adtkit.option import Nothing as Nothing
from adtkit.option import Option as Option
from adtkit.option import Some as Some
from adtkit.remote_data import Failure as Failure
from adtkit.remote_data import Loading as Loading
from adtkit.remote_data import NotAsked as NotAsked
from adtkit.remote_data import RemoteData as RemoteData
from adtkit.remote_data import Success as Success
