"""BuildPath.

Path identity and compiler dependency-file parsing for build systems.

@copyright: Copyright (c) 2010 Lewis Baker, Stuart McMahon.
@license: Licensed under the MIT license.
"""
