#!/usr/bin/env python3
"""
Connectivity check for the service resources
Runs one bootstrap attempt against the configured database, cache and broker,
reports each resource, and releases everything before exiting.
"""

import sys
import os

# Add the project root to Python path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from service_bootstrap.lifecycle import BootstrapError, DEFAULT_ORDER
from service_bootstrap.resources.service_resources import ServiceResources
from service_bootstrap.startup import bootstrap


def print_configs(configs):
    """Show where each resource will be reached."""
    print("Configured resources:")
    for kind, config in configs.items():
        print(f"  - {kind}: {config}")
    print()


def rolled_back_kinds(error: BootstrapError):
    """Kinds that were connected before the failure, in acquisition order."""
    if error.stage == "config" or error.kind not in DEFAULT_ORDER:
        return []
    failed_at = DEFAULT_ORDER.index(error.kind)
    # A failed liveness check still had a connect-only handle to close
    if error.stage == "verify":
        failed_at += 1
    return list(DEFAULT_ORDER[:failed_at])


def report_failure(error: BootstrapError):
    print(f"  ✗ {error.kind} failed during {error.stage}")
    print(f"    Cause: {error.cause}")
    for kind in rolled_back_kinds(error):
        print(f"  ↺ {kind} was connected and has been rolled back")

    if error.rollback_errors:
        print()
        print("  ⚠️  Errors while rolling back:")
        for rollback_error in error.rollback_errors:
            print(f"    - {rollback_error}")


def main():
    """Run the connectivity check."""
    print("="*60)
    print("  Service Resources - Connectivity Check")
    print("="*60)
    print()

    configs = ServiceResources.from_env().resource_configs()
    print_configs(configs)

    print("Bootstrapping...")
    try:
        bundle, release = bootstrap(configs)
    except BootstrapError as e:
        report_failure(e)
        print()
        print("="*60)
        print("❌ Bootstrap failed. Check the settings and that the services are running.")
        print("="*60)
        return 1

    try:
        for kind in bundle.kinds:
            print(f"  ✓ {kind} connected and verified")
    finally:
        release()

    if release.errors:
        print()
        print("  ⚠️  Errors while releasing:")
        for error in release.errors:
            print(f"    - {error}")

    print()
    print("="*60)
    print("✅ All resources reachable.")
    print("="*60)
    return 0


if __name__ == "__main__":
    sys.exit(main())
