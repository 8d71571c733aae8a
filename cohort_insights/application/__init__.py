"""Application layer: DTOs, ports, aggregation modules and use cases.

Depends only on domain and protocol definitions. Infrastructure implements
the ports (record store, audit log, notifications, report export).
"""
