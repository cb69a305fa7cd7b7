#!/usr/bin/env python3
"""
AWS Profile Manager CLI

Runs the aws-auth command line from a source checkout, without installing
the package. Usage is identical to the `aws-auth` console script:

    python scripts/manage_profiles.py add dev
    python scripts/manage_profiles.py use dev
    python scripts/manage_profiles.py dev
"""

import sys
from pathlib import Path

# Add the parent directory to sys.path to import from awsauth
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))
from awsauth.cli import main

if __name__ == "__main__":
    sys.exit(main())
