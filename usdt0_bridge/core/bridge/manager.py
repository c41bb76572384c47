"""Usdt0ProtocolEvm orchestrates bridge quotes and execution for EVM wallets."""

from __future__ import annotations

import logging
from typing import Any, Optional

from ...config import settings
from ...logging_config import bridge_context
from ...providers.base import ChainProvider
from ...providers.rpc import JsonRpcProvider, wrap_provider
from ..deadline import Deadline
from ..wallet.accounts import account_kind
from ..wallet.models import AccountKind, Erc4337TransactionConfig
from .errors import FeeExceededError, NoProviderError, UnsupportedAccountTypeError
from .fees import FeeQuoter
from .models import (
    BridgeCallConfig,
    BridgeOptions,
    BridgeProtocolConfig,
    BridgeQuote,
    BridgeResult,
    BridgeTransactions,
)
from .protocol import BridgeProtocol, OptionsInput
from .resolver import BridgeContractResolver
from .send_param import build_send_param
from .tx_builder import BridgeTransactionBuilder


class Usdt0ProtocolEvm(BridgeProtocol):
    """Bridges USDT0 (and XAUt0) from EVM chains through the LayerZero OFT mesh.

    Standard accounts approve the OFT contract and send through it in two
    sequential transactions. ERC-4337 accounts approve the transaction value
    helper and send through it in a single user operation, paying the
    LayerZero fee in tokens.

    Usage:
        protocol = Usdt0ProtocolEvm(account, BridgeProtocolConfig(bridge_max_fee=10**15))
        quote = await protocol.quote_bridge(options)
        result = await protocol.bridge(options)
    """

    def __init__(
        self,
        account: Any,
        config: Optional[BridgeProtocolConfig] = None,
        *,
        provider: Optional[ChainProvider] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        super().__init__(account, config)
        self._logger = logger or logging.getLogger(__name__)

        if provider is None:
            account_config = getattr(account, "config", None)
            provider = wrap_provider(getattr(account_config, "provider", None))
            self._owns_provider = isinstance(provider, JsonRpcProvider)
        else:
            self._owns_provider = False

        self._provider: Optional[ChainProvider] = provider
        self._resolver: Optional[BridgeContractResolver] = None
        self._fees: Optional[FeeQuoter] = None
        if provider is not None:
            self._resolver = BridgeContractResolver(provider, logger=self._logger)
            self._fees = FeeQuoter(provider)

    @property
    def provider(self) -> Optional[ChainProvider]:
        return self._provider

    async def bridge(
        self,
        options: OptionsInput,
        config: Optional[BridgeCallConfig] = None,
    ) -> BridgeResult:
        """
        Bridge a token to a different blockchain.

        Raises:
            UnsupportedAccountTypeError: the account is read-only or unknown.
            NoProviderError: the account is not connected to a provider.
            FeeExceededError: fee + bridge fee reaches the configured ceiling.
        """
        kind = account_kind(self._account)
        if kind not in (AccountKind.STANDARD, AccountKind.ABSTRACTED):
            raise UnsupportedAccountTypeError(
                "The 'bridge(options)' method requires the protocol to be initialized with a non read-only account."
            )

        if self._provider is None:
            raise NoProviderError(
                "The wallet must be connected to a provider in order to perform bridge operations."
            )

        opts = BridgeOptions.coerce(options)
        with bridge_context(operation="bridge", target_chain=opts.target_chain, account_kind=kind.value):
            return await self._bridge(opts, kind, config)

    async def _bridge(
        self,
        opts: BridgeOptions,
        kind: AccountKind,
        config: Optional[BridgeCallConfig],
    ) -> BridgeResult:
        deadline = self._deadline(config)

        prepared = await self._get_bridge_transactions(opts, kind, deadline)
        fee = await self._quote_fee(kind, prepared, config, deadline)
        self._enforce_max_fee(fee, prepared.bridge_fee, config)

        if kind == AccountKind.ABSTRACTED:
            result = await self._account.send_transaction(
                list(prepared.calls),
                self._wallet_config(config),
            )
            self._logger.info(
                "Bridge user operation submitted: %s (target=%s, amount=%s)",
                result.hash,
                opts.target_chain,
                opts.amount,
            )
            return BridgeResult(hash=result.hash, fee=result.fee, bridge_fee=prepared.bridge_fee)

        approve_result = await self._account.send_transaction(prepared.approve_tx)
        self._logger.info("Bridge approval submitted: %s", approve_result.hash)

        send_result = await self._account.send_transaction(prepared.send_tx)
        self._logger.info(
            "Bridge transaction submitted: %s (target=%s, amount=%s)",
            send_result.hash,
            opts.target_chain,
            opts.amount,
        )

        return BridgeResult(
            hash=send_result.hash,
            fee=approve_result.fee + send_result.fee,
            bridge_fee=prepared.bridge_fee,
            approve_hash=approve_result.hash,
        )

    async def quote_bridge(
        self,
        options: OptionsInput,
        config: Optional[BridgeCallConfig] = None,
    ) -> BridgeQuote:
        """
        Quote the costs of a bridge operation without submitting anything.

        Raises:
            NoProviderError: the account is not connected to a provider.
            UnsupportedAccountTypeError: the account kind is unknown.
        """
        if self._provider is None:
            raise NoProviderError(
                "The wallet must be connected to a provider in order to quote bridge operations."
            )

        kind = account_kind(self._account)
        if kind is None:
            raise UnsupportedAccountTypeError(
                f"Unsupported wallet account type '{type(self._account).__name__}'."
            )

        opts = BridgeOptions.coerce(options)
        deadline = self._deadline(config)

        with bridge_context(operation="quote_bridge", target_chain=opts.target_chain, account_kind=kind.value):
            prepared = await self._get_bridge_transactions(opts, kind, deadline)
            fee = await self._quote_fee(kind, prepared, config, deadline)

        return BridgeQuote(fee=fee, bridge_fee=prepared.bridge_fee)

    async def close(self) -> None:
        """Close the RPC client if this protocol created it."""
        if self._owns_provider and isinstance(self._provider, JsonRpcProvider):
            await self._provider.close()

    # ─────────────────────────────────────────────────────────────────────────
    # Internals
    # ─────────────────────────────────────────────────────────────────────────

    async def _get_bridge_transactions(
        self,
        opts: BridgeOptions,
        kind: AccountKind,
        deadline: Deadline,
    ) -> BridgeTransactions:
        # Static validation (target chain, recipient) happens before any read
        send_param = build_send_param(opts.target_chain, opts.recipient, opts.amount)

        resolved = await self._resolver.resolve(opts.token, opts.target_chain, deadline=deadline)

        if kind.is_abstracted:
            quote = await self._fees.quote_token_fee(
                resolved.source,
                resolved.contract,
                send_param,
                deadline=deadline,
            )
            return BridgeTransactionBuilder.build_bundled(
                token_address=opts.token,
                contract=resolved.contract,
                helper=quote.helper,
                send_param=send_param,
                messaging_fee=quote.messaging_fee,
                bridge_fee=quote.bridge_fee,
            )

        address = await deadline.run(self._account.get_address(), operation="wallet address")
        messaging_fee = await self._fees.quote_native_fee(
            resolved.contract,
            send_param,
            deadline=deadline,
        )
        return BridgeTransactionBuilder.build_standard(
            token_address=opts.token,
            contract=resolved.contract,
            send_param=send_param,
            messaging_fee=messaging_fee,
            owner_address=address,
        )

    async def _quote_fee(
        self,
        kind: AccountKind,
        prepared: BridgeTransactions,
        config: Optional[BridgeCallConfig],
        deadline: Deadline,
    ) -> int:
        if kind.is_abstracted:
            quote = await deadline.run(
                self._account.quote_send_transaction(list(prepared.calls), self._wallet_config(config)),
                operation="user operation fee quote",
            )
            return quote.fee

        approve_quote = await deadline.run(
            self._account.quote_send_transaction(prepared.approve_tx),
            operation="approval fee quote",
        )
        send_quote = await deadline.run(
            self._account.quote_send_transaction(prepared.send_tx),
            operation="bridge fee quote",
        )
        return approve_quote.fee + send_quote.fee

    def _enforce_max_fee(
        self,
        fee: int,
        bridge_fee: int,
        config: Optional[BridgeCallConfig],
    ) -> None:
        bridge_max_fee = self._bridge_max_fee(config)
        if bridge_max_fee is not None and fee + bridge_fee >= bridge_max_fee:
            self._logger.warning(
                "Bridge fee %s + %s exceeds maximum %s",
                fee,
                bridge_fee,
                bridge_max_fee,
            )
            raise FeeExceededError(fee, bridge_fee, bridge_max_fee)

    def _bridge_max_fee(self, config: Optional[BridgeCallConfig]) -> Optional[int]:
        if config is not None and config.bridge_max_fee is not None:
            return config.bridge_max_fee
        if self._config.bridge_max_fee is not None:
            return self._config.bridge_max_fee
        return settings.bridge_max_fee

    def _deadline(self, config: Optional[BridgeCallConfig]) -> Deadline:
        if config is not None and config.timeout_s is not None:
            return Deadline(config.timeout_s)
        if self._config.timeout_s is not None:
            return Deadline(self._config.timeout_s)
        return Deadline(settings.bridge_timeout_seconds)

    @staticmethod
    def _wallet_config(config: Optional[BridgeCallConfig]) -> Optional[Erc4337TransactionConfig]:
        if config is None or config.paymaster_token is None:
            return None
        return Erc4337TransactionConfig(paymaster_token=config.paymaster_token)
