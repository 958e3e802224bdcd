from pathlib import Path

import click

from deployment.constants import DEFAULT_PARAMS_FILEPATH, NFTVERSE_PORTAL

params_file_option = click.option(
    "--params-file",
    "-p",
    "params_filepath",
    help="Deployment parameters YAML file.",
    type=click.Path(dir_okay=False, exists=True, path_type=Path),
    default=DEFAULT_PARAMS_FILEPATH,
    show_default=True,
)

contract_name_option = click.option(
    "--contract-name",
    "-c",
    help="Name of the contract to deploy.",
    type=click.STRING,
    default=NFTVERSE_PORTAL,
    show_default=True,
)

autosign_option = click.option(
    "--autosign",
    help="Automatically sign transactions and skip confirmation prompts.",
    is_flag=True,
)

confirmations_option = click.option(
    "--confirmations",
    help="Block confirmations to wait for; overrides the params file and the network default.",
    type=click.IntRange(min=0),
    required=False,
)

registry_filepath_option = click.option(
    "--registry-filepath",
    "-f",
    help="Filepath of a deployment registry.",
    type=click.Path(dir_okay=False, exists=True, path_type=Path),
    required=True,
)
