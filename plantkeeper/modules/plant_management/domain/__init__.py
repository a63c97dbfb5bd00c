"""
Plant Management Domain

- models: Plant entity and its enumerations
- events: plant domain events and their handlers
"""
