from collections import OrderedDict

from ape.utils import ZERO_ADDRESS


class DeploymentAborted(Exception):
    """The operator answered 'n' at a prompt."""


def ask(question: str) -> None:
    answer = input(f"{question} Y/N? ")
    if answer.strip().lower() == "n":
        print("Aborting deployment!")
        raise DeploymentAborted("Deployment aborted by user.")


def confirm_deployment(contract_name: str, arguments: OrderedDict) -> None:
    """Shows the constructor arguments of a contract and asks before it is deployed."""
    if arguments:
        print(f"\nConstructor arguments for {contract_name}")
        for name, value in arguments.items():
            print(f"\t{name}={value}")
    else:
        print(f"\n(i) {contract_name} takes no constructor arguments")

    ask(f"Deploy {contract_name}")
    if ZERO_ADDRESS in arguments.values():
        ask("Zero address among the constructor arguments; continue anyway?")
