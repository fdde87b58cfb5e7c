"""Data models for kitbag.

Import from submodules:
- artifact: ArtifactKind, KindLayout, KIND_LAYOUTS
- catalog: BrowseItem
- ledger: InstalledPackage, InstalledFile, PackageVersion, LedgerDocument
- registry: RepositoryRegistration, RegistryDocument
- results: UpdateInfo, UpdateReport, UninstallResult, RepoUpdateResult
- spec: InstallSpec
"""
