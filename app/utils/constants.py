"""Common constants."""

# Job categories
JOB_CATEGORIES = ["IT", "Admin", "Marketing", "Sales", "Design", "HR", "Finance", "Other"]

# Experience levels
EXPERIENCE_LEVELS = ["Entry Level", "Mid Level", "Senior Level", "Lead/Manager"]

# Link types, keyed by the domains that identify them
LINK_TYPE_HOSTS = {
    "LinkedIn": ["linkedin.com"],
    "Twitter": ["twitter.com", "x.com"],
    "Instagram": ["instagram.com"],
    "GitHub": ["github.com"],
}
DEFAULT_LINK_TYPE = "Other"
LINK_TYPES = list(LINK_TYPE_HOSTS) + [DEFAULT_LINK_TYPE]

# Window used by the admin dashboard's "new jobs" counter
RECENT_JOBS_DAYS = 7
