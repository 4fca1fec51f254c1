from pathlib import Path
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, IPvAnyAddress

from .utils import PortRanges, SinglePort, parse_port_range

DEFAULT_ADDRESS = "127.0.0.1"
DEFAULT_PORTS = "1-1024"
ALL_PORTS = "0-65535"
DEFAULT_THREADS = 1
DEFAULT_TIMEOUT_MS = 1000


class ScanConfig(BaseModel):
    """
    Everything the scan engine needs, resolved and validated.
    Frozen: built once per run and handed off as-is.
    """
    model_config = ConfigDict(frozen=True)

    address: IPvAnyAddress
    ports: Union[SinglePort, PortRanges]
    # No bounds on threads/timeout here, the engine owns those limits.
    threads: int = DEFAULT_THREADS
    timeout: int = DEFAULT_TIMEOUT_MS
    output: Optional[Path] = None


def build_config(
    address,
    ports: str = DEFAULT_PORTS,
    all_ports: bool = False,
    threads: int = DEFAULT_THREADS,
    timeout: int = DEFAULT_TIMEOUT_MS,
    output: Optional[Union[str, Path]] = None,
) -> ScanConfig:
    """
    Resolves raw CLI values into a ScanConfig.

    `all_ports` wins over whatever `ports` holds. Port parse errors
    (PortRangeError) propagate unchanged; a bad address raises
    pydantic's ValidationError.
    """
    target_ports = ALL_PORTS if all_ports else ports
    selection = parse_port_range(target_ports)

    return ScanConfig(
        address=address,
        ports=selection,
        threads=threads,
        timeout=timeout,
        output=output,
    )
