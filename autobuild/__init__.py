"""Component Autobuild

Builds one component for its dom0 and vm distribution targets after an
upstream change, reports failed builds as issues and publishes successful
builds to the current-testing repository.

The package is organized into domain modules:
- config: Run configuration resolved once at startup
- domains: Source sync, release status, build, reporting and publish phases
- github: GitHub issue tracker client
- orchestrator: The run state machine
- shared: Data types, failure categories and exceptions

Example usage:
    ```
    BUILDER_DIR=~/qubes-builder DIST_DOM0=fc37 DISTS_VM="fc37 bookworm" \\
        autobuild core-admin
    ```
"""

__version__ = "1.2.0"
