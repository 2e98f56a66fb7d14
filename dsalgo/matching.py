"""Maximum bipartite matching of applicants to jobs by augmenting paths."""

from collections.abc import Iterable


def max_bipartite_matching(
    preferences: Iterable[Iterable[int]], num_jobs: int
) -> dict[int, int]:
    """Match applicants to jobs, maximising the number of applicants placed.

    ``preferences[i]`` lists the jobs applicant ``i`` may take, numbered from 0
    below ``num_jobs``. Returns a mapping from job to applicant; its length is
    the size of a maximum matching.
    """
    prefs = [list(jobs) for jobs in preferences]
    for applicant, jobs in enumerate(prefs):
        for job in jobs:
            if not 0 <= job < num_jobs:
                raise ValueError(f"applicant {applicant} lists unknown job {job}")

    holder: dict[int, int] = {}

    def assign(applicant: int, seen: set[int]) -> bool:
        # An applicant gives up a job only if they can move to another one.
        for job in prefs[applicant]:
            if job in seen:
                continue
            seen.add(job)
            if job not in holder or assign(holder[job], seen):
                holder[job] = applicant
                return True
        return False

    for applicant in range(len(prefs)):
        assign(applicant, set())
    return dict(sorted(holder.items()))