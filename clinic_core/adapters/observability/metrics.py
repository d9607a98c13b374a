from prometheus_client import (
    CONTENT_TYPE_LATEST,
    CollectorRegistry,
    Counter,
    generate_latest,
)

# Registry exclusivo (não polui o registry global do processo)
registry = CollectorRegistry()

# Fluxo de caixa (DFC)
CASH_FLOW_UNCLASSIFIED_ENTRIES = Counter(
    'cash_flow_unclassified_entries_total',
    'Lançamentos fora das atividades operacional/investimento/financiamento',
    ['entry_type'],
    registry=registry,
)

# Painel de status
STATUS_PROJECTION_SKIPPED = Counter(
    'status_projection_skipped_total',
    'Consultas do dia ignoradas na projeção de status',
    ['reason'],
    registry=registry,
)

# Registro de categorias
CATEGORY_COMMANDS = Counter(
    'category_commands_total',
    'Operações no registro de categorias',
    ['operation', 'outcome'],
    registry=registry,
)


def render_latest() -> tuple[bytes, str]:
    """Payload + content-type para expor as métricas em qualquer framework web."""
    return generate_latest(registry), CONTENT_TYPE_LATEST
