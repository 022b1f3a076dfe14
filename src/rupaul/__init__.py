"""
rupaul: run a nais application locally with docker-compose and its Vault
secrets populated.
"""

__version__ = "0.1.0"
