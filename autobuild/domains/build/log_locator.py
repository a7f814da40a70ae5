# -
# #%L
# Component Autobuild
# %%
# Copyright (C) 2026 Contrast Security, Inc.
# %%
# Contact: support@contrastsecurity.com
# License: Commercial
# NOTICE: This Software and the patented inventions embodied within may only be
# used as part of Contrast Security's commercial offerings. Even though it is
# made available through public repositories, use of this Software is subject to
# the applicable End User Licensing Agreement found at
# https://www.contrastsecurity.com/enduser-terms-0317a or as otherwise agreed
# between Contrast Security and the End User. The Software may not be reverse
# engineered, modified, repackaged, sold, redistributed or otherwise used in a
# way not consistent with the End User License Agreement.
# #L%
#

import socket
from typing import Optional

from autobuild.config.autobuild_config import DEFAULT_BUILD_LOGS_BASE_URL
from autobuild.utils import log


class LogLocator:
    """Turns a build log identifier into the public URL of the log."""

    def __init__(self, base_url: str = DEFAULT_BUILD_LOGS_BASE_URL):
        self.base_url = base_url.rstrip("/")

    def resolve(self, log_id: Optional[str]) -> str:
        """
        Returns the log URL for log_id.

        Falls back to a URL naming this host when no identifier was assigned
        (for example when the logging channel never started). Never raises.
        """
        if log_id and log_id.strip():
            return f"{self.base_url}/{log_id.strip()}"

        try:
            host = socket.gethostname()
        except OSError:
            host = "localhost"
        log(f"No build log identifier recorded, falling back to host log URL for {host}", is_warning=True)
        return f"{self.base_url}/{host}"
