"""Version number.

@var __version__: Version string for BuildPath. Useful for printing to screen.

@var __version_info__: Version tuple for BuildPath. Useful for comparing
whether one version is newer than another.

@copyright: Copyright (c) 2010 Lewis Baker, Stuart McMahon.
@license: Licensed under the MIT license.
"""

__version_info__ = (0, 1, 0)
__version__ = '.'.join(str(v) for v in __version_info__)
