"""Invocation dispatch for the diamond asset contract."""

from collections.abc import Callable, Mapping, Sequence
from types import MappingProxyType

from .assets.operations import AssetOperations
from .state.base import StateStore
from .utils.errors import LedgerError, UnknownOperationError
from .utils.logging import get_logger
from .utils.types import InvocationResponse

logger = get_logger(__name__)

Handler = Callable[[AssetOperations, Sequence[str]], bytes | None]

OPERATIONS: Mapping[str, Handler] = MappingProxyType(
    {
        "createAsset": AssetOperations.create_asset,
        "queryAsset": AssetOperations.query_asset,
        "transferAsset": AssetOperations.transfer_asset,
    }
)

UNKNOWN_OPERATION_MESSAGE = "Received unknown function invocation"


class DiamondChaincode:
    """Routes named invocations to asset operations."""

    def __init__(self, store: StateStore) -> None:
        """Initialize the contract over a state store."""
        self.operations = AssetOperations(store)

    def init(self, args: Sequence[str] = ()) -> InvocationResponse:
        """Instantiate the contract. Arguments are ignored and no state is touched."""
        logger.info("Init is running", arg_count=len(args))
        return InvocationResponse.ok()

    def invoke(self, function: str, args: Sequence[str]) -> InvocationResponse:
        """Run one invocation and report its outcome."""
        logger.info("Invoke is running", function=function)

        try:
            payload = self._resolve(function)(self.operations, list(args))
        except LedgerError as e:
            logger.warning(
                "Invocation failed",
                function=function,
                error_kind=e.kind.value,
                error=e.message,
            )
            return InvocationResponse.error(e.kind, e.message)

        return InvocationResponse.ok(payload)

    @staticmethod
    def _resolve(function: str) -> Handler:
        handler = OPERATIONS.get(function)
        if handler is None:
            logger.warning("Invoke did not find function", function=function)
            raise UnknownOperationError(UNKNOWN_OPERATION_MESSAGE)
        return handler
