# Copyright (C) 2023 Jae-Won Chung <jwnchung@umich.edu>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Exceptions raised by augflow."""


class AugflowBaseError(Exception):
    """Base class for all exceptions in augflow."""

    def __init__(self, message):
        super().__init__(message)
        self.message = message


class AugflowFlowError(AugflowBaseError):
    """A flow invariant was violated while updating the residual graph."""


class AugflowGraphError(AugflowBaseError):
    """Error while querying or manipulating graphs."""


class AugflowInputError(AugflowBaseError):
    """Bad input supplied by the caller, e.g. an unknown source node name."""
