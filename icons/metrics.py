from __future__ import annotations

from prometheus_client import Counter, Histogram

icons_cache_hits_total = Counter(
    "icons_cache_hits_total",
    "Total de ícones servidos a partir do cache",
)

icons_cache_misses_total = Counter(
    "icons_cache_misses_total",
    "Total de ícones lidos do armazenamento",
)

icons_not_found_total = Counter(
    "icons_not_found_total",
    "Total de referências de ícones não encontradas",
)

icons_registered_sets_total = Counter(
    "icons_registered_sets_total",
    "Total de conjuntos de ícones registrados",
)

ICON_READ_LATENCY = Histogram(
    "icons_read_latency_seconds",
    "Tempo de leitura de um arquivo SVG no armazenamento",
    buckets=(0.001, 0.005, 0.01, 0.05, 0.1, 0.5),
)
