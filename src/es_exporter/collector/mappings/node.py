"""Mappings – flat per-node sections: transport, http, script, process, os."""
from __future__ import annotations

from es_exporter.collector.mappings.base import Field, GaugeSpec, SectionMapping
from es_exporter.conversion import millis_to_seconds


class TransportMapping(SectionMapping):
    name = "transport"

    gauges = (
        GaugeSpec("transport_server_open_number", "Opened server connections"),
        GaugeSpec("transport_rx_packets_count", "Received packets"),
        GaugeSpec("transport_tx_packets_count", "Sent packets"),
        GaugeSpec("transport_rx_bytes_count", "Bytes received"),
        GaugeSpec("transport_tx_bytes_count", "Bytes sent"),
    )

    fields = (
        Field("transport_server_open_number", "server_open"),
        Field("transport_rx_packets_count", "rx_count"),
        Field("transport_tx_packets_count", "tx_count"),
        Field("transport_rx_bytes_count", "rx_size_in_bytes"),
        Field("transport_tx_bytes_count", "tx_size_in_bytes"),
    )


class HttpMapping(SectionMapping):
    name = "http"

    gauges = (
        GaugeSpec("http_open_server_number", "Number of open server connections"),
        GaugeSpec("http_open_total_count", "Count of opened connections"),
    )

    fields = (
        Field("http_open_server_number", "current_open"),
        Field("http_open_total_count", "total_opened"),
    )


class ScriptMapping(SectionMapping):
    name = "script"

    gauges = (
        GaugeSpec("script_cache_evictions_count", "Number of evictions in scripts cache"),
        GaugeSpec("script_compilations_count", "Number of scripts compilations"),
    )

    fields = (
        Field("script_cache_evictions_count", "cache_evictions"),
        Field("script_compilations_count", "compilations"),
    )


class ProcessMapping(SectionMapping):
    name = "process"

    gauges = (
        GaugeSpec("process_cpu_percent", "CPU percentage used by ES process"),
        GaugeSpec("process_cpu_time_seconds", "CPU time used by ES process"),
        GaugeSpec("process_mem_total_virtual_bytes", "Memory used by ES process"),
        GaugeSpec("process_file_descriptors_open_number", "Open file descriptors"),
        GaugeSpec("process_file_descriptors_max_number", "Max file descriptors"),
    )

    fields = (
        Field("process_cpu_percent", "cpu.percent"),
        Field("process_cpu_time_seconds", "cpu.total_in_millis", millis_to_seconds),
        Field("process_mem_total_virtual_bytes", "mem.total_virtual_in_bytes"),
        Field("process_file_descriptors_open_number", "open_file_descriptors"),
        Field("process_file_descriptors_max_number", "max_file_descriptors"),
    )


class OsMapping(SectionMapping):
    name = "os"

    gauges = (
        GaugeSpec("os_cpu_percent", "CPU usage in percent"),
        GaugeSpec("os_load_average", "CPU load"),
        GaugeSpec("os_mem_free_bytes", "Memory free"),
        GaugeSpec("os_mem_free_percent", "Memory free in percent"),
        GaugeSpec("os_mem_used_bytes", "Memory used"),
        GaugeSpec("os_mem_used_percent", "Memory used in percent"),
        GaugeSpec("os_mem_total_bytes", "Total memory size"),
        GaugeSpec("os_swap_free_bytes", "Swap free"),
        GaugeSpec("os_swap_used_bytes", "Swap used"),
        GaugeSpec("os_swap_total_bytes", "Total swap size"),
    )

    fields = (
        Field("os_cpu_percent", "cpu.percent"),
        Field("os_load_average", "cpu.load_average.1m"),
        Field("os_mem_free_bytes", "mem.free_in_bytes"),
        Field("os_mem_free_percent", "mem.free_percent"),
        Field("os_mem_used_bytes", "mem.used_in_bytes"),
        Field("os_mem_used_percent", "mem.used_percent"),
        Field("os_mem_total_bytes", "mem.total_in_bytes"),
        Field("os_swap_free_bytes", "swap.free_in_bytes"),
        Field("os_swap_used_bytes", "swap.used_in_bytes"),
        Field("os_swap_total_bytes", "swap.total_in_bytes"),
    )


__all__ = ["HttpMapping", "OsMapping", "ProcessMapping", "ScriptMapping", "TransportMapping"]
