from candidate_panel.models.candidate import Candidate

__all__ = ["Candidate"]
