#!/usr/bin/env python3
"""Entry point for running the Decision Intel API server."""

from decision_intel.api.server import main

if __name__ == "__main__":
    main()
