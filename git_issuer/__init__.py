"""GitIssuer: forwards issue requests to GitHub and GitLab."""
