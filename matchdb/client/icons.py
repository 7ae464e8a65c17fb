import enum


class IconKey(enum.Enum):
    # tech stack
    databricks = "databricks"
    spark = "spark"
    delta = "delta"
    mlflow = "mlflow"
    unity = "unity"
    # cloud providers
    aws = "aws"
    azure = "azure"
    gcp = "gcp"
    # industrieën
    fintech = "fintech"
    healthcare = "healthcare"
    retail = "retail"
    gaming = "gaming"
    manufacturing = "manufacturing"
    enterprise = "enterprise"
    consulting = "consulting"
    # skills
    analytics = "analytics"
    engineering = "engineering"
    security = "security"
    infrastructure = "infrastructure"


# gesloten tabel: elke IconKey heeft een icoon
ICONS = {
    IconKey.databricks: "database",
    IconKey.spark: "zap",
    IconKey.delta: "database",
    IconKey.mlflow: "bar-chart-3",
    IconKey.unity: "shield",
    IconKey.aws: "cloud",
    IconKey.azure: "cloud",
    IconKey.gcp: "globe",
    IconKey.fintech: "dollar-sign",
    IconKey.healthcare: "heart",
    IconKey.retail: "shopping-cart",
    IconKey.gaming: "gamepad-2",
    IconKey.manufacturing: "factory",
    IconKey.enterprise: "building",
    IconKey.consulting: "briefcase",
    IconKey.analytics: "bar-chart-3",
    IconKey.engineering: "cpu",
    IconKey.security: "shield",
    IconKey.infrastructure: "globe",
}

DEFAULT_ICON = ICONS[IconKey.databricks]


def parse_icon_key(label):
    """'Data Bricks' -> IconKey.databricks, of None als er geen match is."""
    normalized = "".join((label or "").lower().split())
    try:
        return IconKey(normalized)
    except ValueError:
        return None


def icon_for(label):
    key = parse_icon_key(label)
    return ICONS[key] if key is not None else DEFAULT_ICON
