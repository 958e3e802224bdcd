import typing
from collections import OrderedDict
from pathlib import Path

from ape import networks
from ape.api import AccountAPI
from ape.cli.choices import select_account
from ape.contracts.base import ContractContainer, ContractInstance
from ape_accounts import KeyfileAccount
from web3.auto import w3

from deployment.confirm import ask, confirm_deployment
from deployment.networks import is_local_network
from deployment.registry import record_deployments
from deployment.utils import (
    check_infura_credentials,
    get_contract_container,
    load_params,
    validate_config,
)

DEPLOYER_VARIABLE = "$deployer"


class ConstructorArgumentsError(ValueError):
    """The params file's constructor arguments do not fit the contract's constructor."""


def _substitute(value: typing.Any, deployer_address: str) -> typing.Any:
    if isinstance(value, list):
        return [_substitute(item, deployer_address) for item in value]
    if value == DEPLOYER_VARIABLE:
        return deployer_address
    return value


def constructor_arguments(
    config: typing.Dict, contract_name: str, deployer_address: str
) -> OrderedDict:
    """
    Named constructor arguments of a contract as given in the params file, with
    ``$deployer`` replaced by the deployer's address. Everything else is literal.
    """
    contracts = config["contracts"]
    if contract_name not in contracts:
        raise ValueError(f"{contract_name} is not listed in the params file.")
    contract_config = contracts[contract_name] or {}
    arguments = contract_config.get("constructor") or {}
    return OrderedDict(
        (name, _substitute(value, deployer_address)) for name, value in arguments.items()
    )


def check_constructor_arguments(container: ContractContainer, arguments: OrderedDict) -> None:
    contract_name = container.contract_type.name
    abi_inputs = container.constructor.abi.inputs

    expected = [abi_input.name for abi_input in abi_inputs]
    if list(arguments) != expected:
        raise ConstructorArgumentsError(
            f"{contract_name} constructor takes ({', '.join(expected)}); "
            f"params file gives ({', '.join(arguments)})."
        )
    for abi_input, value in zip(abi_inputs, arguments.values()):
        if not w3.is_encodable(abi_input.type, value):
            raise ConstructorArgumentsError(
                f"{contract_name} constructor argument '{abi_input.name}' expects "
                f"{abi_input.type}, got {value!r}."
            )


class Deployer:
    """Deploys contracts described by a params file from a single ape account."""

    def __init__(
        self,
        config: typing.Dict,
        path: Path,
        account: typing.Optional[AccountAPI] = None,
        autosign: bool = False,
        confirmations: typing.Optional[int] = None,
    ):
        self.account = account or select_account()
        self.autosign = autosign
        if autosign:
            print("WARNING: Autosign is enabled. Transactions will be signed automatically.")
            if isinstance(self.account, KeyfileAccount):
                self.account.set_autosign(True)

        check_infura_credentials()
        self.config = config
        self.path = path
        self.registry_filepath = validate_config(config)

        if confirmations is None:
            deployment = config.get("deployment") or {}
            confirmations = deployment.get(
                "confirmations", networks.provider.network.required_confirmations
            )
        self.confirmations = int(confirmations)

        self._print_deployment_info()
        if not autosign:
            ask("Continue")

    @classmethod
    def from_yaml(cls, filepath: Path, **kwargs) -> "Deployer":
        return cls(load_params(filepath), filepath, **kwargs)

    def deploy(self, contract_name: str) -> ContractInstance:
        """Deploys one contract and returns once the network has confirmed it."""
        container = get_contract_container(contract_name)
        arguments = constructor_arguments(self.config, contract_name, self.account.address)
        check_constructor_arguments(container, arguments)
        if not self.autosign:
            confirm_deployment(contract_name, arguments)

        print(f"\nDeploying {contract_name}; awaiting {self.confirmations} confirmation(s)...")
        instance = self.account.deploy(
            container, *arguments.values(), required_confirmations=self.confirmations
        )
        receipt = instance.receipt
        print(f"(i) Confirmed in block {receipt.block_number} (tx {receipt.txn_hash}).")
        return instance

    def finalize(self, deployments: typing.List[ContractInstance]) -> typing.Optional[Path]:
        """Records live deployments in the registry. Local chains leave it untouched."""
        if is_local_network():
            print("(i) Local network; registry not updated.")
            return None
        return record_deployments(
            deployments,
            filepath=self.registry_filepath,
            chain_id=networks.provider.network.chain_id,
        )

    def _print_deployment_info(self):
        network = networks.provider.network
        print(
            f"Account: {self.account.address}",
            f"Config: {self.path}",
            f"Registry: {self.registry_filepath}",
            f"Network: {network.ecosystem.name}:{network.name} (chain {network.chain_id})",
            f"Confirmations: {self.confirmations}",
            f"Gas Price: {networks.provider.gas_price}",
            sep="\n",
        )
