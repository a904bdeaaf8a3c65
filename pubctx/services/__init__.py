# SPDX-License-Identifier: MIT
"""Application services for the pubctx CLI.

Services implement the decision logic, coordinating between the domain
layer (core/) and infrastructure (git/, platform/).
"""

from pubctx.services.publish import (
    Decision,
    PublishInputs,
    PublishState,
    Resolution,
    build_report,
    resolve,
)

__all__ = [
    "Decision",
    "PublishInputs",
    "PublishState",
    "Resolution",
    "build_report",
    "resolve",
]
