"""Ordered substitutions on files inside a running container."""

import logging
import shlex
from typing import Sequence

from ..models.rules import SubstitutionRule
from ..services.docker_service import DockerService
from ..services.exceptions import DockerError

logger = logging.getLogger(__name__)


class ConfigPatcher:
    """Applies substitution rules to a file in a container with ``sed -i``.

    Rules run one editor invocation each, strictly in order. The first failing
    rule aborts the run; rules already applied are not rolled back.
    """

    def __init__(self, docker_service: DockerService):
        self.docker_service = docker_service

    def apply_rules(
        self,
        container_name: str,
        workdir: str,
        rules: Sequence[SubstitutionRule],
        target: str = ".env",
    ) -> None:
        """Apply ``rules`` to ``target`` inside ``workdir`` of ``container_name``.

        Raises:
            DockerError: Naming the first rule (1-based) that failed to apply
        """
        total = len(rules)
        for index, rule in enumerate(rules, start=1):
            logger.debug(f"Applying rule {index}/{total} to {target}: {rule.to_sed()}")
            script = f"sed -i {shlex.quote(rule.to_sed())} {shlex.quote(target)}"
            try:
                result = self.docker_service.exec_shell(container_name, workdir, script)
            except DockerError as e:
                raise DockerError(
                    f"Failed to run rule {index} ({rule}) on {target}: {e}",
                    rule_index=index,
                    rule=rule,
                ) from e
            if not result.success:
                raise DockerError(
                    f"Failed to update {target} with rule {index} ({rule}). "
                    f"Exit status: {result.returncode}",
                    rule_index=index,
                    rule=rule,
                )
