"""
Unit tests for ScanConfig assembly.
Run with: pytest tests/test_config.py -v
"""
import ipaddress
from pathlib import Path

import pytest
from pydantic import ValidationError

from porthawk.config import ALL_PORTS, DEFAULT_PORTS, ScanConfig, build_config
from porthawk.utils import InvalidPort, InvalidRangeOrder, PortRanges, SinglePort, parse_port_range


class TestBuildConfig:
    """Test assembling a ScanConfig from raw inputs"""

    def test_defaults(self):
        """Test default ports, threads, timeout and output"""
        config = build_config("127.0.0.1")
        assert config.address == ipaddress.ip_address("127.0.0.1")
        assert config.ports == PortRanges(((1, 1024),))
        assert config.threads == 1
        assert config.timeout == 1000
        assert config.output is None

    def test_explicit_values(self):
        """Test every field is passed through"""
        config = build_config(
            "192.168.1.10",
            ports="22-25,80-80",
            threads=8,
            timeout=250,
            output="results.txt",
        )
        assert config.ports == PortRanges(((22, 25), (80, 80)))
        assert config.threads == 8
        assert config.timeout == 250
        assert config.output == Path("results.txt")

    def test_single_port(self):
        """Test a single port string"""
        assert build_config("10.0.0.1", ports="443").ports == SinglePort(443)

    def test_ipv6_address(self):
        """Test IPv6 targets are accepted"""
        config = build_config("::1")
        assert config.address == ipaddress.ip_address("::1")
        assert config.address.version == 6

    def test_address_object(self):
        """Test an already-parsed address is accepted"""
        address = ipaddress.ip_address("10.1.2.3")
        assert build_config(address).address == address

    def test_invalid_address(self):
        """Test a hostname is not an IP address"""
        with pytest.raises(ValidationError):
            build_config("example.com")

    def test_no_bounds_on_threads_or_timeout(self):
        """Test thread count and timeout are not range-checked here"""
        config = build_config("127.0.0.1", threads=0, timeout=0)
        assert config.threads == 0
        assert config.timeout == 0


class TestAllPorts:
    """Test the all-ports precedence rule"""

    def test_all_ports_flag(self):
        """Test all-ports selects the full range"""
        config = build_config("127.0.0.1", all_ports=True)
        assert config.ports == parse_port_range(ALL_PORTS)
        assert config.ports == PortRanges(((0, 65535),))

    @pytest.mark.parametrize("ports", [DEFAULT_PORTS, "80", "8080-8000", "garbage", ""])
    def test_all_ports_wins(self, ports):
        """Test the port string is ignored, even when invalid"""
        config = build_config("127.0.0.1", ports=ports, all_ports=True)
        assert config.ports == parse_port_range(ALL_PORTS)


class TestErrorPassThrough:
    """Test parser errors reach the caller unchanged"""

    def test_invalid_port(self):
        """Test InvalidPort propagates"""
        with pytest.raises(InvalidPort) as exc:
            build_config("127.0.0.1", ports="http")
        assert str(exc.value) == "Invalid port: http"

    def test_invalid_order(self):
        """Test InvalidRangeOrder propagates"""
        with pytest.raises(InvalidRangeOrder) as exc:
            build_config("127.0.0.1", ports="8080-8000")
        assert exc.value.text == "8080-8000"


class TestScanConfig:
    """Test the pydantic model itself"""

    def test_frozen(self):
        """Test fields cannot be reassigned"""
        config = build_config("127.0.0.1")
        with pytest.raises(ValidationError):
            config.threads = 4

    def test_direct_construction(self):
        """Test building the model without the assembler"""
        config = ScanConfig(address="127.0.0.1", ports=SinglePort(22))
        assert config.ports == SinglePort(22)
        assert config.threads == 1
        assert config.timeout == 1000

    def test_ports_required(self):
        """Test a port selection is mandatory"""
        with pytest.raises(ValidationError):
            ScanConfig(address="127.0.0.1")

    def test_equal_configs(self):
        """Test two identical builds compare equal"""
        assert build_config("127.0.0.1", ports="1-10") == build_config("127.0.0.1", ports="1-10")
