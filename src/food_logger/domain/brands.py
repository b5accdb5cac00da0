"""Static brand dictionary used for source attribution."""

from pydantic import BaseModel, ConfigDict


class BrandInfo(BaseModel):
    """Display information for a known brand or retailer."""

    model_config = ConfigDict(frozen=True)

    name: str
    icon: str
    color: str


# Ordered: the first key found in a context string wins.
BRANDS: tuple[tuple[str, BrandInfo], ...] = (
    # Coffee shops
    ("starbucks", BrandInfo(name="Starbucks", icon="☕", color="#00704A")),
    ("pret", BrandInfo(name="Pret A Manger", icon="🥐", color="#E31837")),
    ("costa", BrandInfo(name="Costa Coffee", icon="☕", color="#4A4A4A")),
    ("nero", BrandInfo(name="Caffe Nero", icon="☕", color="#1E3A8A")),
    # Fast food
    ("burger king", BrandInfo(name="Burger King", icon="🍔", color="#FF6600")),
    ("pizza hut", BrandInfo(name="Pizza Hut", icon="🍕", color="#FF6600")),
    ("mcdonalds", BrandInfo(name="McDonald's", icon="🍟", color="#FFC72C")),
    ("kfc", BrandInfo(name="KFC", icon="🍗", color="#E4002B")),
    ("subway", BrandInfo(name="Subway", icon="🥪", color="#00A651")),
    ("dominos", BrandInfo(name="Domino's", icon="🍕", color="#E31837")),
    # Supermarkets
    ("tesco", BrandInfo(name="Tesco", icon="🛒", color="#00539F")),
    ("sainsburys", BrandInfo(name="Sainsbury's", icon="🛒", color="#FF6900")),
    ("asda", BrandInfo(name="ASDA", icon="🛒", color="#68A51B")),
    ("morrisons", BrandInfo(name="Morrisons", icon="🛒", color="#00539F")),
    ("waitrose", BrandInfo(name="Waitrose", icon="🛒", color="#4A4A4A")),
    # Packaged brands
    ("kit kat", BrandInfo(name="Kit Kat", icon="🍫", color="#E31837")),
    ("coca cola", BrandInfo(name="Coca Cola", icon="🥤", color="#E31837")),
    ("cadbury", BrandInfo(name="Cadbury", icon="🍫", color="#4A4A4A")),
    ("snickers", BrandInfo(name="Snickers", icon="🍫", color="#4A4A4A")),
    ("mars", BrandInfo(name="Mars", icon="🍫", color="#E31837")),
    ("pepsi", BrandInfo(name="Pepsi", icon="🥤", color="#004B93")),
)

# (alias, brand key, standalone token only)
BRAND_ALIASES: tuple[tuple[str, str, bool], ...] = (
    ("mcdonald", "mcdonalds", False),
    ("mcd", "mcdonalds", False),
    ("bk", "burger king", True),
    ("ph", "pizza hut", True),
)
