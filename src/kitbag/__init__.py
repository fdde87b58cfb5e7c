"""kitbag: Install namespaced artifacts from registered git repositories.

Import from submodules:
- version: __version__
- operations.manager: PackageManager (install, uninstall, check_updates, update)
- operations.registry: RepositoryRegistry (add, remove, update repositories)
"""

from kitbag.version import __version__ as __version__
