"""End-to-end preparation of a script for compilation and execution.

``prepare_script`` is the primary entry point: it walks ``#load`` directives,
synthesizes the project descriptor, runs the cached restore and returns a
load context ready to answer binary load requests.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from pathlib import Path

from scriptdeps.config import ScriptDepsConfig, config_fingerprint, load_config
from scriptdeps.context.host import HostEnvironment, detect_host_environment
from scriptdeps.loading import ScriptLoadContext
from scriptdeps.loading.context import HostResolver
from scriptdeps.model import PreparedScript, ScriptGraph
from scriptdeps.project import resolve_graph, resolve_graph_from_code, synthesize_from_graph
from scriptdeps.restore import CommandRestorer, Restorer, default_project_dir, resolve

logger = logging.getLogger(__name__)


def prepare_script(
    script_path: Path,
    *,
    config: ScriptDepsConfig | None = None,
    config_path: Path | None = None,
    no_cache: bool | None = None,
    restorer: Restorer | None = None,
    host: HostEnvironment | None = None,
    host_resolver: HostResolver | None = None,
) -> PreparedScript:
    """Resolve every dependency of the script at *script_path*.

    Config is read from ``scriptdeps.yaml`` beside the script unless *config*
    is given. Without an explicit *restorer* the configured restore command
    is run.
    """
    graph = resolve_graph(script_path)
    if config is None:
        config = load_config(graph.root.parent, config_path)
    return _prepare(graph, config, no_cache=no_cache, restorer=restorer, host=host, host_resolver=host_resolver)


def prepare_code(
    code: str,
    working_dir: Path,
    *,
    config: ScriptDepsConfig | None = None,
    config_path: Path | None = None,
    no_cache: bool | None = None,
    restorer: Restorer | None = None,
    host: HostEnvironment | None = None,
    host_resolver: HostResolver | None = None,
) -> PreparedScript:
    """Resolve dependencies of in-memory *code* whose loads are relative to *working_dir*."""
    graph = resolve_graph_from_code(code, working_dir)
    if config is None:
        config = load_config(graph.root, config_path)
    return _prepare(graph, config, no_cache=no_cache, restorer=restorer, host=host, host_resolver=host_resolver)


def _prepare(
    graph: ScriptGraph,
    config: ScriptDepsConfig,
    *,
    no_cache: bool | None,
    restorer: Restorer | None,
    host: HostEnvironment | None,
    host_resolver: HostResolver | None,
) -> PreparedScript:
    if no_cache is not None:
        config = replace(config, no_cache=no_cache)
    if host is None:
        host = detect_host_environment(config.runtime_dir, config.runtime_identifier or None)

    target_framework = config.target_framework or host.target_framework
    descriptor = synthesize_from_graph(target_framework, graph)
    project_dir = default_project_dir(graph.root, target_framework, config.effective_cache_root)
    logger.debug(
        "Preparing %s for %s in %s (config %s)",
        graph.root,
        target_framework,
        project_dir,
        config_fingerprint(config)[:12],
    )

    if restorer is None:
        restorer = CommandRestorer(
            config.restore_command,
            runtime_identifier=config.runtime_identifier or host.runtime_identifier or None,
            timeout=config.restore_timeout_seconds,
        )

    context = resolve(
        descriptor,
        config.package_sources,
        project_dir=project_dir,
        restorer=restorer,
        host=host,
        no_cache=config.no_cache,
    )

    warnings: list[str] = []
    for target in graph.remote_loads:
        warning = f"Remote load target was not fetched: {target}"
        logger.warning(warning)
        warnings.append(warning)
    warnings.extend(context.warnings)

    return PreparedScript(
        graph=graph,
        descriptor=descriptor,
        context=context,
        load_context=ScriptLoadContext(context, host_resolver=host_resolver),
        project_dir=project_dir,
        warnings=tuple(warnings),
    )
