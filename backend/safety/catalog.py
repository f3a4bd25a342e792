MAX_SUGGESTIONS = 10

PRODUCTS = [
    "Acetone Nail Polish Remover",
    "Air Freshener Spray",
    "All-Purpose Cleaner",
    "Aluminum Foil",
    "Ammonia",
    "Antibacterial Hand Soap",
    "Antifreeze",
    "Baby Shampoo",
    "Baking Soda",
    "Bathroom Tile Cleaner",
    "Battery Acid",
    "Bleach",
    "Body Lotion",
    "Bug Spray",
    "Car Wax",
    "Carpet Shampoo",
    "Charcoal Lighter Fluid",
    "Chlorine Pool Tablets",
    "Contact Lens Solution",
    "Deodorant",
    "Dishwasher Detergent",
    "Dish Soap",
    "Drain Cleaner",
    "Dry Shampoo",
    "Epoxy Glue",
    "Fabric Softener",
    "Fertilizer",
    "Floor Polish",
    "Furniture Polish",
    "Glass Cleaner",
    "Hair Dye",
    "Hair Spray",
    "Hand Sanitizer",
    "Hydrogen Peroxide",
    "Insect Repellent",
    "Laundry Detergent",
    "Laundry Pods",
    "Lime Scale Remover",
    "Lip Balm",
    "Motor Oil",
    "Mouthwash",
    "Nail Polish",
    "Oven Cleaner",
    "Paint Thinner",
    "Permanent Marker",
    "Pesticide",
    "Rubbing Alcohol",
    "Rust Remover",
    "Shampoo",
    "Shoe Polish",
    "Spray Paint",
    "Stain Remover",
    "Sunscreen",
    "Super Glue",
    "Toilet Bowl Cleaner",
    "Toothpaste",
    "Vinegar",
    "WD-40",
    "Weed Killer",
    "Window Cleaner",
    "Wood Stain",
]


def suggest(query, products=PRODUCTS, limit=MAX_SUGGESTIONS):
    query = (query or "").strip().lower()
    if not query:
        return []
    matches = [product for product in products if query in product.lower()]
    return matches[:limit]
