"""Constants for spm-acknowledgements."""

# Exit codes
EXIT_SUCCESS = 0  # Acknowledgements file written
EXIT_ERROR = 1  # Run aborted due to error

# Environment variable set by Xcode build phases
BUILD_DIR_ENV_VAR = "BUILD_DIR"

# Checkouts location relative to $BUILD_DIR
BUILD_DIR_CHECKOUTS_SUFFIX = "../../SourcePackages/checkouts"

# License file name, matched exactly (case-sensitive, no extensions)
LICENSE_FILE_NAME = "LICENSE"

# Manifest written by SPM next to the checkouts directory
MANIFEST_FILE_NAME = "workspace-state.json"

OUTPUT_FILE_NAME = "acknowledgements.json"

MISSING_SPM_PATH_MESSAGE = "please provide the SPM path with -s or -spm"

# Configuration files searched for in the working directory, in order
CONFIG_FILE_NAMES = (".spm-acknowledgements.yaml", ".spm-acknowledgements.yml")
