"""Fixture records the in-memory stores are seeded with."""

from article_cms.domain.entities import Article, ArticleStatus, Category

_P = ArticleStatus.PUBLISHED
_D = ArticleStatus.DRAFT

# (id, title, category, author, date, read_time, status, excerpt, content, related)
_ARTICLE_ROWS = [
    (
        1, "The Future of AI", "Technology", "John Smith", "2024-05-01", "8 min read", _P,
        "Exploring the latest advancements in artificial intelligence and what it means for the future.",
        "<p>Artificial Intelligence (AI) continues to evolve at an unprecedented pace, transforming "
        "industries and reshaping our daily lives.</p><h2>The Rise of Machine Learning</h2><p>One of "
        "the most significant developments in AI is the advancement of machine learning algorithms, "
        "particularly deep learning.</p>",
        [6, 4],
    ),
    (
        2, "Sustainable Business Practices", "Business", "Emma Johnson", "2024-04-28", "6 min read", _P,
        "How companies are adopting sustainable practices to reduce their environmental impact.",
        "<p>Sustainability has moved from a peripheral concern to a central business imperative. "
        "Companies across the globe are recognizing that sustainable practices are not just good for "
        "the planet, but also for their bottom line.</p><h2>The Business Case for Sustainability</h2>"
        "<p>Research consistently shows that companies with strong environmental, social, and "
        "governance (ESG) practices outperform their peers financially in the long term.</p>",
        [7, 12],
    ),
    (
        3, "Mental Health in the Digital Age", "Health", "Dr. Sarah Chen", "2024-05-03", "7 min read", _D,
        "Understanding the impact of technology on mental health and strategies for digital wellbeing.",
        "<p>The digital revolution has transformed how we work, socialize, and entertain ourselves. "
        "While technology offers unprecedented convenience and connectivity, it also presents new "
        "challenges for mental wellbeing.</p><h2>The Double-Edged Sword of Connectivity</h2><p>Social "
        "media platforms keep us connected with friends and family across the globe, yet studies show "
        "that excessive use can contribute to feelings of loneliness, inadequacy, and anxiety.</p>",
        [8],
    ),
    (
        4, "Quantum Computing Breakthroughs", "Science", "Dr. Michael Wong", "2024-04-15", "9 min read", _P,
        "Recent breakthroughs in quantum computing and their potential applications.",
        "<p>Quantum computing represents one of the most exciting frontiers in computer science, "
        "promising computational capabilities that far exceed those of classical computers for certain "
        "types of problems.</p><h2>Recent Milestones</h2><p>The past year has seen remarkable progress "
        "in quantum computing research. Scientists have achieved quantum advantage, where a quantum "
        "computer outperforms the most powerful classical supercomputers.</p>",
        [1, 9],
    ),
    (
        5, "Streaming Wars: The New Era", "Entertainment", "Alex Rivera", "2024-04-22", "5 min read", _P,
        "An analysis of the competitive landscape in the streaming industry.",
        "<p>The entertainment landscape has been revolutionized by streaming platforms, with "
        "traditional media companies and tech giants battling for subscribers in an increasingly "
        "crowded marketplace.</p><h2>Consolidation and Differentiation</h2><p>After years of "
        "proliferation, the streaming industry is entering a phase of consolidation. Major players are "
        "merging or forming strategic partnerships.</p>",
        [10],
    ),
    (
        6, "Cybersecurity Trends", "Technology", "Lisa Chen", "2024-05-05", "7 min read", _D,
        "The evolving landscape of cybersecurity threats and how to protect yourself.",
        "<p>As our digital footprint expands, so does the sophistication of cyber threats. "
        "Organizations and individuals must stay vigilant and adapt their security strategies to "
        "address evolving risks.</p><h2>The Ransomware Evolution</h2><p>Ransomware attacks have grown "
        "more targeted and damaging, with attackers focusing on high-value organizations and employing "
        "double extortion tactics.</p>",
        [1, 11],
    ),
    (
        7, "Remote Work Revolution", "Business", "James Wilson", "2024-04-18", "6 min read", _P,
        "How remote work is changing the business landscape and employee expectations.",
        "<p>The widespread adoption of remote work during the pandemic has permanently altered "
        "workplace norms and expectations. As organizations navigate this new landscape, they're "
        "reimagining everything from office design to management practices.</p><h2>Hybrid Work "
        "Models</h2><p>Most companies are settling on hybrid arrangements that combine in-person and "
        "remote work.</p>",
        [2, 12],
    ),
    (
        8, "Nutrition Myths Debunked", "Health", "Dr. Robert Kim", "2024-04-10", "8 min read", _P,
        "Common nutrition myths and what science actually says about healthy eating.",
        "<p>In the age of information overload, nutrition advice is often contradictory and confusing. "
        "Separating scientific fact from fiction is essential for making informed dietary choices that "
        "support long-term health.</p><h2>The Breakfast Debate</h2><p>Contrary to popular belief, "
        "breakfast is not inherently the 'most important meal of the day' for everyone.</p>",
        [3],
    ),
    (
        9, "Space Exploration Updates", "Science", "Dr. Emily Carter", "2024-04-05", "7 min read", _D,
        "The latest developments in space exploration and upcoming missions.",
        "<p>We are living in a golden age of space exploration, with multiple nations and private "
        "companies pushing the boundaries of human knowledge and capability beyond Earth.</p><h2>Mars "
        "Missions Advance</h2><p>Robotic explorers on Mars continue to make remarkable discoveries "
        "about the red planet's past and present conditions.</p>",
        [4],
    ),
    (
        10, "The Rise of Indie Gaming", "Entertainment", "Maya Rodriguez", "2024-03-25", "6 min read", _P,
        "How independent game developers are reshaping the gaming industry.",
        "<p>Independent game development has evolved from a niche pursuit to a vital and influential "
        "sector of the gaming industry, delivering some of the most innovative and artistically "
        "significant titles in recent years.</p><h2>Creative Freedom Unleashed</h2><p>Freed from the "
        "commercial pressures and risk aversion that often constrain AAA studios, indie developers can "
        "explore unconventional gameplay mechanics.</p>",
        [5],
    ),
    (
        11, "Blockchain Beyond Cryptocurrency", "Technology", "Daniel Park", "2024-03-20", "8 min read", _D,
        "Exploring practical applications of blockchain technology beyond digital currencies.",
        "<p>While blockchain technology first gained prominence as the foundation for "
        "cryptocurrencies, its potential applications extend far beyond digital currencies to "
        "transform numerous industries and processes.</p><h2>Supply Chain Transparency</h2><p>Blockchain "
        "provides an immutable record of a product's journey from origin to consumer, enabling "
        "unprecedented supply chain transparency.</p>",
        [1, 6],
    ),
    (
        12, "Sustainable Investing", "Business", "Olivia Thompson", "2024-03-15", "7 min read", _P,
        "The growing trend of environmental, social, and governance (ESG) investing.",
        "<p>Sustainable investing has evolved from a niche approach to a mainstream investment "
        "strategy, as investors increasingly recognize that environmental, social, and governance (ESG) "
        "factors can materially impact financial performance.</p><h2>Beyond Exclusionary "
        "Screening</h2><p>While early sustainable investing focused primarily on excluding "
        "controversial industries, today's approaches are more sophisticated and nuanced.</p>",
        [2, 7],
    ),
]

_CATEGORY_ROWS = [
    (1, "Technology", 3),
    (2, "Business", 3),
    (3, "Health", 2),
    (4, "Science", 2),
    (5, "Entertainment", 2),
]


def seed_articles() -> list[Article]:
    """Fresh list of the twelve fixture articles (ids 1 to 12)."""
    return [
        Article(
            id=article_id,
            title=title,
            category=category,
            author=author,
            date=date,
            read_time=read_time,
            status=status,
            excerpt=excerpt,
            content=content,
            related_articles=list(related),
        )
        for (
            article_id, title, category, author, date, read_time, status, excerpt, content, related
        ) in _ARTICLE_ROWS
    ]


def seed_categories() -> list[Category]:
    """Fresh list of the five fixture categories."""
    return [
        Category(id=category_id, name=name, article_count=count)
        for category_id, name, count in _CATEGORY_ROWS
    ]
