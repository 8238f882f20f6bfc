from raci_health.dataloader.config_loader import ConfigLoader
from raci_health.dataloader.snapshot_loader import SnapshotLoader

__all__ = ["ConfigLoader", "SnapshotLoader"]
