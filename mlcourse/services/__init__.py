from mlcourse.services.progress import Level, compute_total, progress_update_for
from mlcourse.services.quiz import QuizRunner, readiness_tier

__all__ = ["Level", "QuizRunner", "compute_total", "progress_update_for", "readiness_tier"]
