"""
Deployment registry: a JSON file recording where each contract was deployed, keyed
by chain ID and then contract name::

    {"<chain_id>": {"<ContractName>": {"address", "abi", "tx_hash", "block_number", "deployer"}}}
"""

import json
from pathlib import Path
from typing import Any, Dict, List, NamedTuple

from ape.contracts import ContractInstance
from eth_typing import ChecksumAddress
from eth_utils import to_checksum_address, to_hex

RegistryData = Dict[str, Dict[str, Dict[str, Any]]]


class RegistryEntry(NamedTuple):
    chain_id: int
    name: str
    address: ChecksumAddress
    abi: List[Dict[str, Any]]
    tx_hash: str
    block_number: int
    deployer: ChecksumAddress


def _load(filepath: Path) -> RegistryData:
    if not filepath.exists():
        return {}
    with open(filepath, "r") as file:
        return json.load(file)


def read_registry(filepath: Path) -> List[RegistryEntry]:
    return [
        RegistryEntry(chain_id=int(chain_id), name=name, **record)
        for chain_id, contracts in _load(filepath).items()
        for name, record in contracts.items()
    ]


def is_recorded(filepath: Path, chain_id: int, name: str) -> bool:
    return name in _load(filepath).get(str(chain_id), {})


def _hex(value) -> str:
    return value if isinstance(value, str) else to_hex(value)


def _record(instance: ContractInstance) -> Dict[str, Any]:
    receipt = instance.receipt
    return {
        "address": to_checksum_address(instance.address),
        "abi": [entry.model_dump(mode="json") for entry in instance.contract_type.abi],
        "tx_hash": _hex(receipt.txn_hash),
        "block_number": int(receipt.block_number),
        "deployer": to_checksum_address(receipt.transaction.sender),
    }


def record_deployments(
    deployments: List[ContractInstance], filepath: Path, chain_id: int
) -> Path:
    """
    Adds deployments made on ``chain_id`` to the registry at ``filepath``, creating it if
    needed. A contract recorded again on the same chain replaces its earlier record.
    """
    data = _load(filepath)
    chain_records = data.setdefault(str(chain_id), {})
    for instance in deployments:
        chain_records[instance.contract_type.name] = _record(instance)

    filepath.parent.mkdir(parents=True, exist_ok=True)
    with open(filepath, "w") as file:
        json.dump(data, file, indent=4, sort_keys=True)
    print(f"(i) Registry written to {filepath}!")
    return filepath
