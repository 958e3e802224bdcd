from ape import networks
from ape.api.networks import LOCAL_NETWORK_NAME

# ape names forked networks "<network>-fork", e.g. "mainnet-fork"
FORK_SUFFIX = "-fork"


def is_local_network() -> bool:
    """True for ape's local test chain and for forks of live networks."""
    network_name = networks.provider.network.name
    return network_name == LOCAL_NETWORK_NAME or network_name.endswith(FORK_SUFFIX)
