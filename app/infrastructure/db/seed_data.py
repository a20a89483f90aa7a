"""Datos de demostración (usuario demo, notas, grupos, notas globales, preguntas y plan de estudio).

Las fechas se expresan como desfase respecto al momento del seed para que los
textos relativos ("hace 2 horas") tengan sentido.
"""
from datetime import timedelta

DEMO_USER_ID = "user_1"

USERS = [
    {"id": DEMO_USER_ID, "email": "alex@cognitia.app", "name": "Alex Johnson", "email_verified": True, "is_active": True},
    {"id": "user_2", "email": "maria@cognitia.app", "name": "Maria Garcia", "email_verified": True, "is_active": True},
    {"id": "user_3", "email": "sam@cognitia.app", "name": "Sam Lee", "email_verified": True, "is_active": True},
]

NOTES_GROUPS = [
    {"id": "group_1", "name": "Mathematics", "description": "Calculus and linear algebra", "created": timedelta(days=60)},
    {"id": "group_2", "name": "Physics", "description": "Mechanics and waves", "created": timedelta(days=45)},
    {"id": "group_3", "name": "Computer Science", "description": "Algorithms and data structures", "created": timedelta(days=30)},
]

NOTES = [
    {"id": "note_1", "title": "Calculus Derivatives Cheatsheet", "notes_group_id": "group_1", "visibility": "public",
     "rating": 4.5, "created": timedelta(days=20), "updated": timedelta(hours=2)},
    {"id": "note_2", "title": "Linear Algebra Eigenvalues", "notes_group_id": "group_1", "visibility": "private",
     "rating": 0, "created": timedelta(days=15), "updated": timedelta(days=1)},
    {"id": "note_3", "title": "Newton Laws Summary", "notes_group_id": "group_2", "visibility": "public",
     "rating": 4.0, "created": timedelta(days=12), "updated": timedelta(days=3)},
    {"id": "note_4", "title": "Wave Equations", "notes_group_id": "group_2", "visibility": "private",
     "rating": 3.5, "created": timedelta(days=10), "updated": timedelta(days=5)},
    {"id": "note_5", "title": "Sorting Algorithms Overview", "notes_group_id": "group_3", "visibility": "public",
     "rating": 5.0, "created": timedelta(days=8), "updated": timedelta(hours=6)},
    {"id": "note_6", "title": "Graph Traversal BFS DFS", "notes_group_id": "group_3", "visibility": "private",
     "rating": 0, "created": timedelta(days=4), "updated": timedelta(days=2)},
]

GLOBAL_NOTES = [
    {"id": "global_1", "title": "Integration Techniques", "group_name": "Mathematics", "author": "user_2",
     "rating": 4.8, "view_count": 1250, "like_count": 210, "dislike_count": 4,
     "created": timedelta(days=40), "updated": timedelta(hours=3)},
    {"id": "global_2", "title": "Thermodynamics Basics", "group_name": "Physics", "author": "user_3",
     "rating": 4.1, "view_count": 830, "like_count": 95, "dislike_count": 7,
     "created": timedelta(days=35), "updated": timedelta(days=2)},
    {"id": "global_3", "title": "Dynamic Programming Patterns", "group_name": "Computer Science", "author": "user_2",
     "rating": 4.9, "view_count": 2100, "like_count": 340, "dislike_count": 9,
     "created": timedelta(days=25), "updated": timedelta(hours=12)},
    {"id": "global_4", "title": "Probability Distributions", "group_name": "Mathematics", "author": "user_3",
     "rating": 3.6, "view_count": 410, "like_count": 38, "dislike_count": 5,
     "created": timedelta(days=18), "updated": timedelta(days=6)},
    {"id": "global_5", "title": "Quantum Mechanics Intro", "group_name": "Physics", "author": "user_2",
     "rating": 2.9, "view_count": 150, "like_count": 12, "dislike_count": 6,
     "created": timedelta(days=9), "updated": timedelta(days=9)},
    {"id": "global_6", "title": "Organic Chemistry Reactions", "group_name": "Chemistry", "author": "user_3",
     "rating": 4.3, "view_count": 640, "like_count": 77, "dislike_count": 2,
     "created": timedelta(days=5), "updated": timedelta(days=1, hours=4)},
]

QUESTIONS = [
    {"id": "question_1", "title": "How do I find eigenvalues of a 3x3 matrix?",
     "body": "I understand the 2x2 case but get lost expanding the characteristic polynomial.",
     "tags": ["Mathematics", "linear-algebra"], "author": "user_2", "vote_count": 12, "answer_count": 3,
     "is_resolved": True, "created": timedelta(hours=5)},
    {"id": "question_2", "title": "Why does a pendulum's period not depend on mass?",
     "body": "Intuitively a heavier bob should swing differently.",
     "tags": ["Physics", "mechanics"], "author": "user_3", "vote_count": 8, "answer_count": 1,
     "is_resolved": False, "created": timedelta(days=1)},
    {"id": "question_3", "title": "When is quicksort worse than mergesort?",
     "body": "Looking for concrete input patterns.",
     "tags": ["Computer Science", "algorithms"], "author": "user_2", "vote_count": 5, "answer_count": 0,
     "is_resolved": False, "created": timedelta(days=2)},
]

TASKS = [
    {"id": "task_1", "title": "Review derivative rules", "description": "Chain and product rule drills",
     "status": "in_progress", "due": timedelta(days=-2), "created": timedelta(days=3)},
    {"id": "task_2", "title": "Physics problem set 4", "description": "", "status": "pending",
     "due": timedelta(days=-5), "created": timedelta(days=2)},
    {"id": "task_3", "title": "Implement BFS", "description": "Practice on adjacency lists", "status": "completed",
     "due": timedelta(days=1), "created": timedelta(days=6), "completed": timedelta(days=1)},
]

SESSIONS = [
    {"id": "session_1", "task_id": "task_1", "start": timedelta(days=-1), "minutes": 60, "notes": "Chain rule"},
    {"id": "session_2", "task_id": "task_1", "start": timedelta(days=-3), "minutes": 45, "notes": ""},
    {"id": "session_3", "task_id": "task_2", "start": timedelta(days=-2), "minutes": 90, "notes": "Problems 1-5"},
]
