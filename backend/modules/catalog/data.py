"""
The fixed course catalog shipped with MiniLearn.
"""

from .models import Course, Difficulty


COURSES: tuple[Course, ...] = (
    Course(
        id="1",
        title="Intro to Python",
        description="Learn the basics of Python programming from scratch",
        long_description=(
            "Master Python fundamentals including variables, functions, loops, "
            "and data structures. Perfect for absolute beginners who want to "
            "start their coding journey with one of the most popular "
            "programming languages."
        ),
        icon="🐍",
        color="from-blue-500 to-cyan-500",
        difficulty=Difficulty.BEGINNER,
        duration="4 weeks",
    ),
    Course(
        id="2",
        title="Web Development Basics",
        description="Build your first website with HTML, CSS, and JavaScript",
        long_description=(
            "Dive into web development by learning HTML for structure, CSS for "
            "styling, and JavaScript for interactivity. By the end, you'll build "
            "responsive websites and understand how the web works."
        ),
        icon="🌐",
        color="from-purple-500 to-pink-500",
        difficulty=Difficulty.BEGINNER,
        duration="6 weeks",
    ),
    Course(
        id="3",
        title="AI for Beginners",
        description="Understand artificial intelligence and machine learning concepts",
        long_description=(
            "Explore the fascinating world of AI and machine learning. Learn "
            "about neural networks, deep learning, and how AI is transforming "
            "technology. Includes hands-on projects and real-world applications."
        ),
        icon="🤖",
        color="from-orange-500 to-red-500",
        difficulty=Difficulty.INTERMEDIATE,
        duration="8 weeks",
    ),
    Course(
        id="4",
        title="React Fundamentals",
        description="Build modern web apps with React and components",
        long_description=(
            "Learn React, the most popular JavaScript library for building user "
            "interfaces. Master components, hooks, state management, and build "
            "interactive single-page applications."
        ),
        icon="⚛️",
        color="from-teal-500 to-green-500",
        difficulty=Difficulty.INTERMEDIATE,
        duration="5 weeks",
    ),
)
