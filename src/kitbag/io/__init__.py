"""I/O operations for kitbag.

Import from submodules:
- config: ConfigStore, FilesystemConfigStore, GlobalConfig
- ledger: PackageLedger, FilesystemPackageLedger
- registry_store: RegistryStore, FilesystemRegistryStore
"""
