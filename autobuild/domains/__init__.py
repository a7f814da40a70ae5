"""Autobuild Domains

The run is organized into domain modules:
- domains.builder: Contracts for the build toolchain and the qubes-builder driver
- domains.scm: Builder and component source synchronization
- domains.release: Release status checks
- domains.build: Build execution and build log URLs
- domains.reporting: Failure reports
- domains.publish: Signing and publishing gate
"""
