"""
Domain layer.

Pure business logic per bounded context: entities, rules, ports (ABCs)
and domain errors. Nothing here imports a framework or performs IO.
"""
