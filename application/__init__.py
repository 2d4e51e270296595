"""
Application Layer for the Fitness Dashboard.

This package contains:
- ports/: Abstract interfaces (remote gateway, local key-value store)
- services/: Session guard, table loaders, local settings store
- use_cases/: Workout logging and authentication actions
"""
