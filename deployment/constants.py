from pathlib import Path

import deployment

#
# Filesystem
#

DEPLOYMENT_DIR = Path(deployment.__file__).parent
CONSTRUCTOR_PARAMS_DIR = DEPLOYMENT_DIR / "constructor_params"
ARTIFACTS_DIR = DEPLOYMENT_DIR / "artifacts"

DEFAULT_PARAMS_FILEPATH = CONSTRUCTOR_PARAMS_DIR / "nftverse_portal.yml"

#
# Contracts
#

NFTVERSE_PORTAL = "NFTversePortal"

DEPLOYED_MESSAGE = "{contract_name} contract deployed to: {address}"

#
# Process
#

EXIT_SUCCESS = 0
EXIT_FAILURE = 1
