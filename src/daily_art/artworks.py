from daily_art.models import Artwork

MEDIUM = "Digital graphic"
DIMENSIONS = "400x300px"
TAGS = ["abstract", "minimalism", "generative-art"]

ARTWORKS = [
    Artwork(
        title="Abstract composition #247",
        artist="AI Generated",
        description="A minimalist composition in shades of grey, exploring the relation between space and form.",
        image_url=(
            "data:image/svg+xml,%3Csvg width='400' height='300' xmlns='http://www.w3.org/2000/svg'%3E"
            "%3Crect width='400' height='300' fill='%23f8f9fa'/%3E"
            "%3Crect x='50' y='50' width='120' height='80' fill='%23343a40'/%3E"
            "%3Ccircle cx='300' cy='150' r='60' fill='%23868e96'/%3E"
            "%3Cpath d='M150 200 L250 180 L200 250 Z' fill='%23495057'/%3E%3C/svg%3E"
        ),
    ),
    Artwork(
        title="Geometric harmony #12",
        artist="Algorithm Design",
        description="A simple play of colour and shape, inspired by the Bauhaus and Russian constructivism.",
        image_url=(
            "data:image/svg+xml,%3Csvg width='400' height='300' xmlns='http://www.w3.org/2000/svg'%3E"
            "%3Crect width='400' height='300' fill='%23fff'/%3E"
            "%3Ccircle cx='100' cy='100' r='40' fill='%23ff6b6b'/%3E"
            "%3Crect x='200' y='50' width='80' height='80' fill='%234ecdc4'/%3E"
            "%3Cpath d='M300 200 L350 250 L250 250 Z' fill='%23ffe66d'/%3E%3C/svg%3E"
        ),
    ),
    Artwork(
        title="Digital meditation",
        artist="Neural Network",
        description="Calm, flowing forms produced by a deep learning process.",
        image_url=(
            "data:image/svg+xml,%3Csvg width='400' height='300' xmlns='http://www.w3.org/2000/svg'%3E"
            "%3Crect width='400' height='300' fill='%23e8f4f8'/%3E"
            "%3Cpath d='M50 150 Q200 50 350 150 Q200 250 50 150' fill='%236c5ce7' opacity='0.7'/%3E"
            "%3Cpath d='M100 100 Q250 200 350 100' stroke='%23fd79a8' stroke-width='3' fill='none'/%3E%3C/svg%3E"
        ),
    ),
]
