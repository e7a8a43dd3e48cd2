#!/usr/bin/env python3
"""
powledger exception hierarchy

Ordinary invalid input is reported through ValidationResult values, not
through these exceptions. They cover unresolved forks, malformed records at
the serialization boundary, and a broken genesis configuration.
"""


class LedgerError(Exception):
    """Base class for all powledger errors"""
    pass


class ConsensusError(LedgerError):
    """A fork could not be resolved"""
    pass


class NoValidChainError(ConsensusError):
    """Neither the local nor the remote chain passed validation"""

    def __init__(self, local_result, remote_result):
        self.local_result = local_result
        self.remote_result = remote_result
        super().__init__(
            f"local and remote chains are both invalid "
            f"(local: {local_result.describe()}; remote: {remote_result.describe()})"
        )


class MalformedBlockError(LedgerError, ValueError):
    """A serialized block does not match the record layout"""
    pass


class GenesisConfigurationError(LedgerError):
    """The configured genesis block fails its startup self-test"""
    pass
