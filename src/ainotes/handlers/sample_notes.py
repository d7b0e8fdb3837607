"""Built-in sample corpus used to seed a user's notebook."""

from typing import Final

SAMPLE_NOTES: Final[list[tuple[str, str]]] = [
    # Video games
    (
        "Breath of the Wild Exploration",
        "An open-world Zelda where every mountain you can see can be climbed. "
        "Physics-driven puzzles, weather that changes how you fight, and shrines "
        "scattered across Hyrule reward curiosity over following a quest marker.",
    ),
    (
        "Dark Souls Level Design",
        "Dark Souls teaches through failure. Stamina-based combat punishes greed, "
        "and the interconnected world loops back on itself through shortcuts that "
        "make earlier areas feel like a real place.",
    ),
    (
        "Stardew Valley Farm Planning",
        "Plan crop layouts around sprinklers, keep a few seasonal festivals in mind, "
        "and balance mining trips with building friendships in town. The game is "
        "about steady routines rather than optimal play.",
    ),
    (
        "Hades Roguelike Loop",
        "Every failed escape from the underworld moves the story forward and buys "
        "permanent upgrades. Weapon aspects and boons make each run play "
        "differently, so dying never feels wasted.",
    ),
    (
        "Portal Puzzle Mechanics",
        "Two linked portals and conservation of momentum are enough to build an "
        "entire puzzle game. New ideas are introduced one at a time, and GLaDOS "
        "keeps the tone darkly funny.",
    ),
    # Movies
    (
        "Inception Dream Layers",
        "A heist crew plants an idea through nested dreams. Time stretches at every "
        "level down, limbo waits at the bottom, and the spinning top leaves the "
        "final scene open to interpretation.",
    ),
    (
        "Blade Runner 2049 Cinematography",
        "Roger Deakins frames every shot like a painting. Orange haze and cold blue "
        "neon carry the film's questions about memory and what makes someone human.",
    ),
    (
        "Parasite and Class",
        "The Kim family slowly infiltrates the wealthy Park household. Stairs and "
        "basements map the social hierarchy, and the genre shifts from comedy to "
        "thriller keep the audience off balance.",
    ),
    (
        "Arrival and Language",
        "Learning the heptapod language changes how Louise perceives time. The film "
        "turns the Sapir-Whorf hypothesis into plot and asks whether knowing the "
        "future changes the choice to live it.",
    ),
    (
        "Mad Max Fury Road Storytelling",
        "Almost the whole story is told through one long chase. Practical stunts, "
        "minimal dialogue, and Furiosa quietly taking over as the real protagonist.",
    ),
    # Programming
    (
        "Python asyncio Patterns",
        "Use asyncio.TaskGroup to run independent coroutines concurrently and wait "
        "for all of them. Cancellation propagates to child tasks, and one failing "
        "task cancels its siblings.",
    ),
    (
        "Database Indexing Strategies",
        "Indexes speed up reads and slow down writes. B-tree indexes handle range "
        "queries, composite indexes follow the leftmost prefix rule, and unused "
        "indexes should be dropped.",
    ),
    (
        "RESTful API Design",
        "Resources are nouns and HTTP methods are verbs. Return meaningful status "
        "codes, paginate large collections, and version the API from day one.",
    ),
    (
        "Git Branching Strategies",
        "Trunk-based development keeps branches short-lived, while Git Flow adds "
        "release and hotfix branches. Feature flags let unfinished work ship "
        "safely behind a switch.",
    ),
    (
        "Docker Image Optimization",
        "Multi-stage builds keep compilers out of the final image. Order layers "
        "from least to most frequently changing and use a .dockerignore to keep "
        "the build context small.",
    ),
    (
        "Test-Driven Development",
        "Red, green, refactor: write a failing test, make it pass with the simplest "
        "code, then clean up. Keep tests fast and isolated and mock slow external "
        "dependencies.",
    ),
    # Fantasy books
    (
        "Middle-earth World-Building",
        "Tolkien invented languages first and wrote histories to give them speakers. "
        "The Shire, Rohan and Gondor each carry thousands of years of lore behind "
        "the main story.",
    ),
    (
        "Sanderson Magic Systems",
        "Allomancy burns metals for specific powers and has clear costs. Hard magic "
        "with firm limits lets characters solve problems in ways the reader can "
        "follow and anticipate.",
    ),
    (
        "Discworld Satire",
        "A flat world on the backs of four elephants standing on a turtle. Each "
        "Pratchett novel skewers something real, from the press to religion, with "
        "footnotes doing half the comedy.",
    ),
    (
        "The Broken Earth Trilogy",
        "Orogenes can still earthquakes but are feared and controlled. Second-person "
        "narration, a world ending over and over, and a sharp look at oppression "
        "and survival.",
    ),
]
