"""
Job handler interface for the Solr indexer.

Host integrations invoke handlers through the JobHandler protocol and receive
an `Outcome`; they never see exceptions from the pipeline.
"""

from __future__ import annotations

import abc
from typing import Any, Mapping, Protocol, runtime_checkable

from solr_indexer.domain.models import Outcome


@runtime_checkable
class JobHandler(Protocol):
    """
    Capability a host integration layer calls once per job.

    Attributes
    ----------
    name : str
        A short machine-friendly identifier.
    """

    name: str

    def run(self, job_args: Mapping[str, Any], config: Mapping[str, Any]) -> Outcome:
        """
        Process one job.

        Parameters
        ----------
        job_args : Mapping[str, Any]
            Parsed job arguments; must contain `id`.
        config : Mapping[str, Any]
            Service configuration for this invocation.

        Returns
        -------
        Outcome
            Success with the index status line, or a classified failure.
        """
        ...


class AbstractJobHandler(abc.ABC):
    """
    Optional ABC helper for class-based implementations.

    Subclasses should set `name` and implement `run`.
    """

    name: str

    @abc.abstractmethod
    def run(
        self, job_args: Mapping[str, Any], config: Mapping[str, Any]
    ) -> Outcome:  # pragma: no cover - interface only
        """Run the job and return its outcome."""
        raise NotImplementedError


__all__ = ["AbstractJobHandler", "JobHandler"]
