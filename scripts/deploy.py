#!/usr/bin/python3
import sys
from pathlib import Path
from typing import Optional

import click
from ape.api import AccountAPI
from ape.cli import ConnectedProviderCommand, account_option, network_option

from deployment.constants import DEPLOYED_MESSAGE, EXIT_FAILURE, EXIT_SUCCESS
from deployment.options import (
    autosign_option,
    confirmations_option,
    contract_name_option,
    params_file_option,
)
from deployment.params import Deployer


def _fail(error: Exception) -> int:
    click.secho(f"{type(error).__name__}: {error}", fg="red", err=True)
    return EXIT_FAILURE


def main(
    params_filepath: Path,
    contract_name: str,
    account: Optional[AccountAPI] = None,
    autosign: bool = False,
    confirmations: Optional[int] = None,
) -> int:
    """Deploys a single contract and reports its address; returns the process exit code."""
    try:
        deployer = Deployer.from_yaml(
            filepath=params_filepath,
            account=account,
            autosign=autosign,
            confirmations=confirmations,
        )
        instance = deployer.deploy(contract_name)
    except Exception as error:
        return _fail(error)

    # live on chain from here on
    print(DEPLOYED_MESSAGE.format(contract_name=contract_name, address=instance.address))

    try:
        deployer.finalize(deployments=[instance])
    except Exception as error:
        return _fail(error)
    return EXIT_SUCCESS


@click.command(cls=ConnectedProviderCommand)
@network_option(required=True)
@account_option()
@params_file_option
@contract_name_option
@autosign_option
@confirmations_option
def cli(network, account, params_filepath, contract_name, autosign, confirmations):
    """
    Deploy a contract and print the address it was deployed to.

    ape run deploy --network ethereum:sepolia --account nftverse-deployer
    """
    sys.exit(
        main(
            params_filepath=params_filepath,
            contract_name=contract_name,
            account=account,
            autosign=autosign,
            confirmations=confirmations,
        )
    )


if __name__ == "__main__":
    cli()
