# Merchandising taxonomy shared by the resolver and the CLI.
# Retailer lists live in config/category_fallbacks.json; this module only
# carries the category names and the keyword heuristics.

DEFAULT_CATEGORY = "Culture & divertissement"

# Ordered (category, keywords) pairs. Order is precedence: "cafe velo" is
# Gastronomie, not Sport. Keywords are matched as whole words against the
# normalized keyword, so "whisk" does not match "whisky".
HEURISTIC_KEYWORDS = [
    (
        "Gastronomie & boissons",
        ["rhum", "whisk", "gin", "bier", "vin", "champagne", "verre", "carafe",
         "cocktail", "cafe", "the", "choco", "praline"],
    ),
    (
        "Sport & plein air",
        ["yoga", "velo", "running", "randon", "fitness", "sport", "tente",
         "couchage", "camp"],
    ),
    (
        "Maison & décoration",
        ["bougie", "vase", "cadre", "plaid", "coussin", "lampe", "vaisselle",
         "plante", "terrarium", "deco", "miroir"],
    ),
    (
        "Beauté & bien-être",
        ["parfum", "creme", "maquillage", "serum", "massage", "spa", "rituals"],
    ),
    (
        "Culture & divertissement",
        ["livre", "roman", "bd", "manga", "vinyle", "jeu de societe", "puzzle",
         "musique", "concert"],
    ),
    (
        "High-tech & gadgets",
        ["casque", "ecouteur", "enceinte", "montre connect", "batterie",
         "chargeur", "polaroid", "appareil", "ordinateur", "pc"],
    ),
    (
        "Enfants & famille",
        ["peluche", "lego", "poussette", "jouet", "doudou", "babyphone"],
    ),
    (
        "Loisirs créatifs & DIY",
        ["peinture", "tricot", "crochet", "origami", "scrap", "outil",
         "perceuse", "macrame"],
    ),
    (
        "Voyages & expériences",
        ["billet", "theatre", "restaurant", "sejour", "week end", "bongo",
         "wonderbox"],
    ),
    (
        "Animaux",
        ["chat", "chien", "laisse", "croquettes", "arbre a chat", "litiere"],
    ),
]
