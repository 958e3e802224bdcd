import os
from pathlib import Path
from typing import Dict

import yaml
from ape import networks, project
from ape.contracts import ContractContainer

from deployment.constants import ARTIFACTS_DIR
from deployment.networks import is_local_network
from deployment.registry import is_recorded

INFURA_API_KEY_ENVVARS = ("WEB3_INFURA_PROJECT_ID", "WEB3_INFURA_API_KEY")


def load_params(filepath: Path) -> Dict:
    """Reads a deployment params YAML file."""
    with open(filepath, "r") as file:
        params = yaml.safe_load(file)
    if not isinstance(params, dict):
        raise ValueError(f"{filepath} does not hold a params mapping.")
    return params


def get_registry_filepath(config: Dict) -> Path:
    artifacts = config.get("artifacts") or {}
    filename = artifacts.get("filename")
    if not filename:
        raise ValueError("artifacts.filename is not set in params file.")
    return Path(artifacts.get("dir", ARTIFACTS_DIR)) / filename


def get_chain_id(config: Dict) -> int:
    """
    The chain a params file deploys to. Files without a chain_id follow
    the connected network; files with one must match it on live networks.
    """
    provider_chain_id = networks.provider.network.chain_id
    deployment = config.get("deployment") or {}
    chain_id = deployment.get("chain_id")
    if chain_id is None:
        return provider_chain_id

    chain_id = int(chain_id)
    if chain_id != provider_chain_id and not is_local_network():
        raise ValueError(
            f"Params file targets chain {chain_id} but the connected network "
            f"is chain {provider_chain_id}."
        )
    return chain_id


def validate_config(config: Dict) -> Path:
    """
    Checks a params file against the connected network and returns the registry
    its deployments are recorded in. Live deployments that are already recorded
    for the target chain are refused.
    """
    print("Validating parameters YAML...")
    contracts = config.get("contracts")
    if not isinstance(contracts, dict) or not contracts:
        raise ValueError("Params file has no 'contracts' mapping.")

    chain_id = get_chain_id(config)
    registry_filepath = get_registry_filepath(config)
    if is_local_network():
        return registry_filepath

    for contract_name in contracts:
        if is_recorded(registry_filepath, chain_id=chain_id, name=contract_name):
            raise ValueError(
                f"{contract_name} is already recorded for chain {chain_id} in {registry_filepath}."
            )
    return registry_filepath


def check_infura_credentials() -> None:
    """Live deployments through the infura provider need an API key in the environment."""
    if is_local_network() or networks.provider.name != "infura":
        return
    if not any(os.environ.get(envvar) for envvar in INFURA_API_KEY_ENVVARS):
        raise ValueError(
            f"No Infura API key found; set one of {', '.join(INFURA_API_KEY_ENVVARS)}."
        )


def get_contract_container(contract_name: str) -> ContractContainer:
    try:
        return getattr(project, contract_name)
    except AttributeError:
        raise ValueError(f"No contract named '{contract_name}' in the ape project.")


def get_chain_name(chain_id: int) -> str:
    """Human readable '<ecosystem> <network>' name of a chain."""
    names = (
        f"{ecosystem_name} {network_name}"
        for ecosystem_name, ecosystem in networks.ecosystems.items()
        for network_name, network in ecosystem.networks.items()
        if network.chain_id == chain_id
    )
    name = next(names, None)
    if name is None:
        raise ValueError(f"Chain ID {chain_id} not found in networks.")
    return name
