# -*- coding: utf-8 -*-

# Copyright (c) Huoty, All rights reserved
# Author: Huoty <sudohuoty@163.com>

HostsMergeError = type("HostsMergeError", (Exception,), {})

MissingDependencyError = type("MissingDependencyError", (HostsMergeError,), {})
FetchError = type("FetchError", (HostsMergeError,), {})
ConfigurationError = type("ConfigurationError", (HostsMergeError,), {})
