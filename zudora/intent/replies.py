from __future__ import annotations

WELCOME = (
    "Hello! I'm Zudora, your college suggestion assistant. I can help you find the best "
    "engineering colleges based on your cutoff marks and category. Please share your marks "
    "and category (OC, BC, BCM, MBC, SC, SCA, ST) to get personalized suggestions!"
)

GREETING = (
    "Hello! Great to meet you! I'm Zudora, your AI college counselor. I specialize in helping "
    "students find the perfect engineering colleges based on their TNEA cutoff marks and "
    "category. How can I assist you today?"
)

SMALL_TALK = (
    "I'm doing wonderful, thank you for asking! I'm here and ready to help you navigate the "
    "college selection process. Whether you need college suggestions, cutoff information, or "
    "guidance about engineering branches, I'm here to help!"
)

COLLEGE_QUERY = (
    "I'd be happy to help you with college suggestions! To provide you with the most relevant "
    "recommendations, I'll need to know:\n\n"
    "1. Your cutoff marks (TNEA score)\n"
    "2. Your category (OC, BC, BCM, MBC, SC, SCA, or ST)\n\n"
    "For example, you can say: 'I scored 185 marks in BC category' or "
    "'My cutoff is 170 and I'm in MBC category.'"
)

HELP = (
    "I'm here to help you find the best engineering colleges based on your TNEA cutoff marks "
    "and category. You can ask me things like:\n\n"
    "• 'I scored 185 marks in BC category'\n"
    "• 'What colleges can I get with 175 cutoff in OC?'\n"
    "• 'Show me CSE colleges for MBC category'\n\n"
    "Feel free to share your marks and category, and I'll provide personalized college "
    "suggestions!"
)


def format_score(score: float) -> str:
    return f"{score:.15g}"


def suggestions_found(score: float, category: str, count: int) -> str:
    return (
        f"Great! Based on your cutoff marks of {format_score(score)} and {category} category, "
        f"I found {count} excellent college options for you. Here are the top colleges where "
        "you have a good chance of admission:"
    )


def no_match(score: float, category: str) -> str:
    return (
        f"I understand you have {format_score(score)} marks in {category} category. "
        "Unfortunately, I couldn't find colleges that match these specific criteria in my "
        "current database. You might want to consider:\n\n"
        "1. Checking if there are any updates to cutoffs\n"
        "2. Looking at colleges with slightly lower requirements\n"
        "3. Exploring different engineering branches\n\n"
        "Would you like me to help you with a different marks range or category?"
    )
