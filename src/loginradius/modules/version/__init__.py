# -*- coding: utf-8 -*-
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

__major__ = 2 # stable release
__minor__ = 1 # new feature
__semantic__ = 0 # bug fix
__tag__ = "dev"

__version__ = f"{__major__}.{__minor__}.{__semantic__}-{__tag__}"
__author__ = "LoginRadius SDK Team"
__appname__ = "LoginRadius Python SDK"

__fullname__ = f"{__appname__} {__version__}"
