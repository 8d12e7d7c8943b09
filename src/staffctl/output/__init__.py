"""Human and JSON rendering for directory results."""
