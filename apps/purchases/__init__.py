"""
Purchases App - Purchase Records and Shopping List

This app manages what the household buys: purchase records with their
lines, and the shared shopping list that can be promoted into a purchase.

Key Features:
- Purchase intake that merges bought items into inventory
- Shopping list entries, pending until purchased
- Promotion of selected shopping list entries into one purchase

Architecture:
- Models: Purchase, PurchaseLine, ShoppingListEntry
- Writes: household operations in apps.operations (audited)
- Views: RESTful API with ViewSets
"""
