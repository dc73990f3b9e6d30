"""
Sample catalog: three Metro Manila barangays and four native or
naturalised shade trees. Used by the in-memory backend for demos and local
development.
"""
from tree_planner.domain.models import (
    Barangay,
    FloodRisk,
    GrowthTimeline,
    Tree,
    UrbanDensity,
)

COMMON_TIMELINE = GrowthTimeline(
    seedling="1-2 months",
    juvenile="1-3 years",
    mature="5+ years",
)

SAMPLE_BARANGAYS = (
    Barangay(
        id=1,
        name="Barangay San Antonio, Pasig",
        latitude=14.5826,
        longitude=121.0620,
        population=20000,
        flood_risk=FloodRisk.LOW,
        urban_density=UrbanDensity.HIGH,
    ),
    Barangay(
        id=2,
        name="Barangay Tumana, Marikina",
        latitude=14.6543,
        longitude=121.0962,
        population=45000,
        flood_risk=FloodRisk.HIGH,
        urban_density=UrbanDensity.HIGH,
    ),
    Barangay(
        id=3,
        name="Barangay UP Campus, Quezon City",
        latitude=14.6537,
        longitude=121.0685,
        population=35000,
        flood_risk=FloodRisk.LOW,
        urban_density=UrbanDensity.MEDIUM,
    ),
)

SAMPLE_TREES = (
    Tree(
        id=1,
        name="Banaba",
        scientific_name="Lagerstroemia speciosa",
        description="A deciduous tree known for its beautiful purple flowers.",
        image_url="https://upload.wikimedia.org/wikipedia/commons/thumb/5/5d/Lagerstroemia_speciosa_01.jpg/800px-Lagerstroemia_speciosa_01.jpg",
        min_area_sqm=12,
        flood_resilient=True,
        urban_suitable=True,
        growth_timeline=COMMON_TIMELINE,
    ),
    Tree(
        id=2,
        name="Narra",
        scientific_name="Pterocarpus indicus",
        description="The national tree of the Philippines, strong and durable.",
        image_url="https://upload.wikimedia.org/wikipedia/commons/thumb/c/c4/Starr_080601-6577_Terminalia_catappa.jpg/800px-Starr_080601-6577_Terminalia_catappa.jpg",
        min_area_sqm=25,
        flood_resilient=True,
        urban_suitable=False,  # Large roots
        growth_timeline=COMMON_TIMELINE.model_copy(update={"mature": "10+ years"}),
    ),
    Tree(
        id=3,
        name="Amaltas (Golden Shower)",
        scientific_name="Cassia fistula",
        description="Famous for its hanging yellow flowers.",
        image_url="https://upload.wikimedia.org/wikipedia/commons/thumb/6/6c/Cassia_fistula_-_Golden_Shower_Tree.jpg/800px-Cassia_fistula_-_Golden_Shower_Tree.jpg",
        min_area_sqm=10,
        flood_resilient=False,
        urban_suitable=True,
        growth_timeline=COMMON_TIMELINE,
    ),
    Tree(
        id=4,
        name="Talisay",
        scientific_name="Terminalia catappa",
        description="Known as Sea Almond, provides excellent shade.",
        image_url="https://upload.wikimedia.org/wikipedia/commons/thumb/c/c4/Starr_080601-6577_Terminalia_catappa.jpg/800px-Starr_080601-6577_Terminalia_catappa.jpg",
        min_area_sqm=20,
        flood_resilient=True,
        urban_suitable=True,
        growth_timeline=COMMON_TIMELINE,
    ),
)
