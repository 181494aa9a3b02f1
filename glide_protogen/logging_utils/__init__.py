# SPDX-License-Identifier: Apache-2.0
from glide_protogen.logging_utils.log_time import logtime

__all__ = ["logtime"]
