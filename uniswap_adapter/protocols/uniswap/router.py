"""
Uniswap V3 SwapRouter commands

The router never signs or broadcasts. Each command returns an unsigned
transaction request (to, data, value, chainId) for an external signer.
"""

import logging
from typing import Any, Dict, Optional, Tuple, Union

from ...errors import ContractCallFailed, WrongPoolFee
from ...infra.provider import ContractProvider, resolve_provider
from ...types.common import checksum_address
from ...types.params import ExactInputSingleParams, ExactOutputSingleParams
from .abi import V3_ROUTER_ABI
from .api import UniswapDeployment, get_deployment
from .encoding import check_uint, fee_to_uint24

logger = logging.getLogger(__name__)

TxRequest = Dict[str, Any]


def exact_input_to_tuple(params: ExactInputSingleParams) -> Tuple:
    """
    Map ExactInputSingleParams onto the router's struct layout

    Raises:
        InvalidAddressFormat: Bad token or recipient address
        WrongPoolFee: Fee does not fit uint24
        ValueOutOfRange: Amount, deadline or price limit out of range
    """
    return (
        checksum_address(params.token_in, "token_in"),
        checksum_address(params.token_out, "token_out"),
        fee_to_uint24(params.fee),
        checksum_address(params.recipient, "recipient"),
        check_uint("deadline", params.deadline, 256),
        check_uint("amount_in", params.amount_in, 256),
        check_uint("amount_out_minimum", params.amount_out_minimum, 256),
        check_uint("sqrt_price_limit_x96", params.sqrt_price_limit_x96, 160),
    )


def exact_output_to_tuple(params: ExactOutputSingleParams) -> Tuple:
    """Map ExactOutputSingleParams onto the router's struct layout"""
    return (
        checksum_address(params.token_in, "token_in"),
        checksum_address(params.token_out, "token_out"),
        fee_to_uint24(params.fee),
        checksum_address(params.recipient, "recipient"),
        check_uint("deadline", params.deadline, 256),
        check_uint("amount_out", params.amount_out, 256),
        check_uint("amount_in_maximum", params.amount_in_maximum, 256),
        check_uint("sqrt_price_limit_x96", params.sqrt_price_limit_x96, 160),
    )


class UniswapV3Router:
    """
    Builds unsigned single-pool swap transactions for the V3 SwapRouter

    Usage:
        router = UniswapV3Router(provider)
        tx = router.exact_input_single(params, sender=wallet)
        signed = account.sign_transaction({**tx, "nonce": ..., "gas": ...})
    """

    def __init__(
        self,
        provider: Union[ContractProvider, str],
        deployment: Optional[UniswapDeployment] = None,
    ):
        self._provider = resolve_provider(provider)
        self._deployment = deployment or get_deployment()

    @property
    def address(self) -> str:
        return self._deployment.require("router")

    @property
    def chain_id(self) -> int:
        return self._deployment.chain_id

    def _build(
        self,
        function: str,
        struct: Tuple,
        sender: Optional[str],
        simulate: bool,
    ) -> TxRequest:
        router = self.address
        fee_value = struct[2]

        data = self._provider.encode(router, V3_ROUTER_ABI, function, struct)

        tx: TxRequest = {
            "to": router,
            "data": data,
            "value": 0,
            "chainId": self.chain_id,
        }
        if sender is not None:
            tx["from"] = checksum_address(sender, "sender")

        if simulate:
            call_tx = {"from": tx["from"]} if "from" in tx else None
            try:
                result = self._provider.call(router, V3_ROUTER_ABI, function, struct, tx=call_tx)
            except WrongPoolFee:
                raise
            except ContractCallFailed as e:
                logger.debug(f"{function} simulation reverted fee={fee_value}: {e}")
                raise WrongPoolFee.from_call(e, fee_value) from e
            logger.debug(f"{function} simulation returned {result}")

        logger.info(f"Built {function} tx for router {router} on chain {self.chain_id}")
        return tx

    def exact_input_single(
        self,
        params: ExactInputSingleParams,
        sender: Optional[str] = None,
        simulate: bool = False,
    ) -> TxRequest:
        """
        Build an exactInputSingle transaction request

        Args:
            params: Exact-input swap parameters
            sender: Optional sender address, set as "from"
            simulate: eth_call the swap before returning

        Returns:
            Unsigned transaction request

        Raises:
            InvalidAddressFormat: Bad token, recipient or sender address
            ValueOutOfRange: A field does not fit its ABI width
            WrongPoolFee: Fee does not fit uint24, or the simulation reverted
            OperationNotSupported: No router on this chain
        """
        return self._build("exactInputSingle", exact_input_to_tuple(params), sender, simulate)

    def exact_output_single(
        self,
        params: ExactOutputSingleParams,
        sender: Optional[str] = None,
        simulate: bool = False,
    ) -> TxRequest:
        """Build an exactOutputSingle transaction request"""
        return self._build("exactOutputSingle", exact_output_to_tuple(params), sender, simulate)
