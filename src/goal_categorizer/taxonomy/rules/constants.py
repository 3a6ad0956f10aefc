# src/goal_categorizer/taxonomy/rules/constants.py
# Indicator word sets for the context rules. All lowercase; matched as
# substrings of the normalized blob, so short stems ("op", "af") are broad.

# ---------- Purchase intent ----------
PURCHASE_INDICATORS = [
    "kopen", "bestellen", "aanschaffen", "halen", "koop", "bestelling",
    "order", "aankoop", "shop", "winkelen",
]

NECESSITY_INDICATORS = [
    "nodig", "moet", "moeten", "kapot", "vervangen", "essentieel", "urgent",
    "belangrijk", "broken", "defect", "leeg", "op", "noodzakelijk", "dringend",
    "snel", "emergency", "repair", "stuk", "af", "geen", "zonder",
]

LIFESTYLE_INDICATORS = [
    "leuk", "mooi", "cool", "want", "wil", "graag", "nice", "trendy", "fashion",
    "style", "zin", "inspiratie", "uitproberen", "nieuw", "upgrade", "fancy",
    "decoratie", "gezellig",
]

# used when neither or both of the cue sets above are present
FOOD_ITEMS = ["boodschappen", "eten", "voedsel", "melk", "brood", "groente", "fruit", "vlees", "vis"]
HOUSEHOLD_BASICS = ["toiletpapier", "wasmiddel", "zeep", "shampoo", "tandpasta", "schoonmaakmiddel"]
CLOTHING_ITEMS = ["kleding", "shirt", "broek", "schoenen", "jas", "trui"]

# item groups: a purchase of one of these is shopping, not the item's own domain
HEALTH_PURCHASE_ITEMS = [
    "medicijnen", "vitamines", "supplement", "protein", "sportvoeding",
    "gezonde snacks", "superfood", "organic", "bio", "creatine", "whey",
    "multivitamine",
]
HOUSEHOLD_PURCHASE_ITEMS = [
    "wasmiddel", "schoonmaakmiddel", "toiletpapier", "zeep", "shampoo",
    "tandpasta", "afwasmiddel", "stofzuiger zakjes", "sponzen", "doekjes",
    "vaatwastabletten",
]
PRACTICAL_PURCHASE_ITEMS = [
    "tools", "gereedschap", "lamp", "batterijen", "kabels", "adapter", "sloten",
    "sleutels", "reparatie spullen", "onderdelen", "schroeven", "bevestiging",
]
PRACTICAL_URGENCY_CUES = ["reparatie", "kapot", "defect", "nodig", "moet"]
ENTERTAINMENT_PURCHASE_ITEMS = [
    "game", "console", "film", "boek", "muziek", "tickets", "concert",
    "bioscoop", "streaming", "netflix", "spotify", "playstation", "xbox",
    "nintendo",
]
PRODUCTIVITY_PURCHASE_ITEMS = [
    "laptop", "computer", "telefoon", "software", "app", "abonnement", "office",
    "adobe", "notitie boek", "agenda", "pen", "marker", "bureau", "stoel",
    "monitor",
]
PRODUCTIVITY_WORK_CUES = ["werk", "kantoor", "professional", "business", "project", "meeting"]

STRONG_NECESSITY_INDICATORS = [
    "moet", "moeten", "nodig", "kapot", "defect", "vervangen", "urgent",
    "dringend", "emergency", "broken", "stuk", "leeg", "op",
]

# ---------- Cooking vs nutrition ----------
NUTRITION_KEYWORDS = ["eten", "water"]
HEALTH_CONTEXT = [
    "gezond", "dieet", "afvallen", "nutrition", "calories", "healthy", "fit",
    "abnehmen", "vitamines", "supplement", "protein",
]
COOKING_CONTEXT = [
    "maken", "koken", "bereiden", "recept", "ingredienten", "cooking", "menu",
    "maaltijd", "oven", "pan", "keuken",
]

# ---------- Work vs fitness training ----------
TRAINING_KEYWORDS = ["training"]
WORK_TRAINING_CONTEXT = [
    "werk", "kantoor", "professional", "vak", "cursus", "certificaat", "skills",
    "carriere", "baan", "collega", "meeting", "project",
]
FITNESS_CONTEXT = [
    "gym", "sport", "fitness", "cardio", "strength", "workout", "conditie",
    "kracht", "spieren", "beweging",
]

# ---------- Romantic vs platonic ----------
RELATIONSHIP_KEYWORDS = ["vriend", "vriendin"]
ROMANTIC_CONTEXT = [
    "date", "liefde", "samen", "relationship", "romantic", "love", "partner",
    "boyfriend", "girlfriend", "kus",
]
FRIEND_CONTEXT = ["vrienden", "groep", "uitjes", "social", "friends", "gezellig", "party", "feest", "club"]

# ---------- Finance vs administration ----------
PAPERWORK_KEYWORDS = ["documenten", "administratie"]
FINANCE_CONTEXT = [
    "geld", "belasting", "bank", "financieel", "budget", "kosten", "sparen",
    "investeren", "euro", "dollar",
]
OFFICIAL_CONTEXT = ["gemeente", "paspoort", "rijbewijs", "aanvraag", "formulier", "digid", "overheid", "officieel"]

# ---------- Professional vs personal learning ----------
LEARNING_KEYWORDS = ["leren"]
PROFESSIONAL_LEARNING_CONTEXT = [
    "werk", "professional", "carriere", "efficiency", "deadline", "project",
    "task", "time management",
]
PERSONAL_LEARNING_CONTEXT = [
    "hobby", "interesse", "persoonlijk", "passion", "creatief", "fun",
    "ontspanning", "zelfverbetering",
]

# ---------- Time slot ----------
EARLY_SLOT_CUES = ["voor 0", "vroeg", "ochtend"]
WAKE_UP_WORDS = ["opstaan", "wakker"]
SPORT_SLOT_CUES = ["10:00", "11:00", "gym", "sport"]
ACTIVITY_WORDS = ["beweging", "actief", "training", "workout", "exercise"]
