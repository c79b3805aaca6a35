"""
coin.domain — The Coin value type.

Nothing in here imports from coin.fault_injection; the harness depends on
the domain, never the other way round.
"""
