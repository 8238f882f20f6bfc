from raci_health.metrics.metrics import compute_health_score, compute_metrics, health_label

__all__ = ["compute_health_score", "compute_metrics", "health_label"]
