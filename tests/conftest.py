from types import SimpleNamespace

import pytest
import yaml

from deployment import networks as deployment_networks
from deployment import params, utils

DEPLOYER_ADDRESS = "0x7E5F4552091A69125d5DfCb7b8C2659029395Bdf"
PORTAL_ADDRESS = "0x2B5AD5c4795c026514f8317c7a215E218DcCD6cF"
TREASURY_ADDRESS = "0x6813Eb9362372EEF6200f3b1dbC3f819671cBA69"
TX_HASH = "0x" + "ab" * 32
LOCAL_CHAIN_ID = 1337
SEPOLIA_CHAIN_ID = 11155111


class FakeABIEntry:
    def __init__(self, type_, name=None):
        self.type = type_
        self.name = name

    def model_dump(self, mode="python"):
        data = {"type": self.type}
        if self.name:
            data["name"] = self.name
        return data


def make_container(name, inputs=None):
    contract_type = SimpleNamespace(
        name=name,
        abi=[FakeABIEntry("constructor"), FakeABIEntry("function", "owner")],
    )
    return SimpleNamespace(
        contract_type=contract_type,
        constructor=SimpleNamespace(abi=SimpleNamespace(inputs=inputs or [])),
    )


def abi_input(name, type_):
    return SimpleNamespace(name=name, type=type_)


class FakeAccount:
    def __init__(self, address=DEPLOYER_ADDRESS, error=None):
        self.address = address
        self.error = error
        self.deploy_calls = []

    def deploy(self, container, *args, **kwargs):
        self.deploy_calls.append((container, args, kwargs))
        if self.error:
            raise self.error
        receipt = SimpleNamespace(
            txn_hash=TX_HASH,
            block_number=42,
            transaction=SimpleNamespace(sender=self.address),
        )
        return SimpleNamespace(
            address=PORTAL_ADDRESS,
            contract_type=container.contract_type,
            receipt=receipt,
        )


@pytest.fixture
def provider_network():
    return SimpleNamespace(
        name="local",
        chain_id=LOCAL_CHAIN_ID,
        required_confirmations=0,
        ecosystem=SimpleNamespace(name="ethereum"),
    )


@pytest.fixture
def live_network(provider_network):
    provider_network.name = "sepolia"
    provider_network.chain_id = SEPOLIA_CHAIN_ID
    provider_network.required_confirmations = 2
    return provider_network


@pytest.fixture(autouse=True)
def fake_networks(monkeypatch, provider_network):
    fake = SimpleNamespace(
        provider=SimpleNamespace(name="test", gas_price=1_000_000_000, network=provider_network)
    )
    for module in (deployment_networks, utils, params):
        monkeypatch.setattr(module, "networks", fake)
    return fake


@pytest.fixture
def containers(monkeypatch):
    registered = {"NFTversePortal": make_container("NFTversePortal")}

    def get_contract_container(name):
        try:
            return registered[name]
        except KeyError:
            raise ValueError(f"No contract named '{name}' in the ape project.")

    monkeypatch.setattr(params, "get_contract_container", get_contract_container)
    return registered


@pytest.fixture
def account():
    return FakeAccount()


@pytest.fixture
def registry_filepath(tmp_path):
    return tmp_path / "artifacts" / "portal.json"


@pytest.fixture
def write_params(tmp_path, registry_filepath):
    def _write(contracts=None, chain_id=None, confirmations=None):
        deployment = {"name": "nftverse-portal-test"}
        if chain_id is not None:
            deployment["chain_id"] = chain_id
        if confirmations is not None:
            deployment["confirmations"] = confirmations
        config = {
            "deployment": deployment,
            "artifacts": {
                "dir": str(registry_filepath.parent),
                "filename": registry_filepath.name,
            },
            "contracts": contracts if contracts is not None else {"NFTversePortal": None},
        }
        filepath = tmp_path / "params.yml"
        filepath.write_text(yaml.safe_dump(config, sort_keys=False))
        return filepath

    return _write


@pytest.fixture
def params_filepath(write_params):
    return write_params()
