"""
Block Type Registry — type → label, icône, catégorie, props par défaut.

Catalogue statique, figé à l'import. Sert au menu d'ajout de bloc,
à l'expansion des templates et au dispatcher de rendu.
"""
import copy
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Iterator, List, Optional

from pydantic import BaseModel, ConfigDict

from .blocks.models import Block, new_block_id
from .errors import RegistryError


class BlockTypeEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: str
    label: str
    icon: str
    category: str = "content"
    defaults: Dict[str, Any] = {}
    editable: bool = False   # variante éditable inline disponible
    # prop → décalage en jours depuis maintenant, recalculé à chaque appel
    relative_dates: Dict[str, int] = {}

    def default_props(self) -> Dict[str, Any]:
        """Copie profonde — les defaults du registry ne sont jamais partagés."""
        props = copy.deepcopy(self.defaults)
        for key, days in self.relative_dates.items():
            props[key] = _in_days(days)
        return props


class BlockTypeRegistry:
    def __init__(self, entries: Optional[List[BlockTypeEntry]] = None):
        self._entries: Dict[str, BlockTypeEntry] = {}
        for entry in entries or []:
            self.register(entry)

    def register(self, entry: BlockTypeEntry) -> BlockTypeEntry:
        if entry.type in self._entries:
            raise RegistryError(f"Type de bloc dupliqué : {entry.type!r}")
        self._entries[entry.type] = entry
        return entry

    def validate(self) -> "BlockTypeRegistry":
        """Invariant de construction : au moins une entrée."""
        if not self._entries:
            raise RegistryError("Registry de blocs vide")
        return self

    def get(self, block_type: str) -> Optional[BlockTypeEntry]:
        return self._entries.get(block_type)

    def __contains__(self, block_type: object) -> bool:
        return block_type in self._entries

    def __iter__(self) -> Iterator[BlockTypeEntry]:
        return iter(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def types(self) -> List[str]:
        return list(self._entries)

    def default_props(self, block_type: str) -> Dict[str, Any]:
        entry = self._entries.get(block_type)
        return entry.default_props() if entry else {}

    def menu(self) -> Dict[str, List[BlockTypeEntry]]:
        """Entrées groupées par catégorie, dans l'ordre d'enregistrement."""
        groups: Dict[str, List[BlockTypeEntry]] = {}
        for entry in self._entries.values():
            groups.setdefault(entry.category, []).append(entry)
        return groups

    def create_block(self, block_type: str) -> Block:
        """Action "ajouter un bloc" : id neuf, props = defaults tels quels."""
        return Block(id=new_block_id(), type=block_type, props=self.default_props(block_type))


def _in_days(days: int) -> str:
    stamp = datetime.now(timezone.utc) + timedelta(days=days)
    return stamp.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _product(pid: str, image: str, title: str, price: float, rating: float,
             reviews: int, url: str, sale: Optional[float] = None,
             badge: Optional[str] = None) -> Dict[str, Any]:
    p = {
        "id": pid, "image": image, "title": title, "price": price,
        "rating": rating, "reviewCount": reviews, "inStock": True,
        "productUrl": url, "quickViewEnabled": True,
    }
    if sale is not None:
        p["salePrice"] = sale
    if badge:
        p["badge"] = badge
    return p


def _nav(nid: str, label: str, url: str) -> Dict[str, Any]:
    return {"id": nid, "label": label, "link": {"type": "internal", "url": url}, "children": []}


_E = BlockTypeEntry

# ── Entrées ─────────────────────────────────────────────────────────────────

_ENTRIES: List[BlockTypeEntry] = [
    # Médias
    _E(type="audio", label="Audio Player", icon="music", category="media", editable=True, defaults={
        "title": "Track Title",
        "artist": "Artist Name",
        "albumArt": "https://picsum.photos/200",
        "audioUrl": "",
    }),
    _E(type="video", label="Video Player", icon="video", category="media", editable=True, defaults={
        "videoUrl": "",
        "posterUrl": "https://picsum.photos/800/450",
        "title": "Video Title",
    }),
    _E(type="gallery", label="Image Gallery", icon="image", category="media", editable=True, defaults={
        "layout": "grid",
        "columns": 3,
        "images": [
            {"src": "https://picsum.photos/400/300?1", "caption": "Image 1"},
            {"src": "https://picsum.photos/400/300?2", "caption": "Image 2"},
            {"src": "https://picsum.photos/400/300?3", "caption": "Image 3"},
        ],
    }),

    # Contenu
    _E(type="button", label="Button", icon="square", defaults={
        "text": "Click Me", "style": "solid", "size": "medium",
        "icon": None, "iconPosition": "left", "url": "#",
    }),
    _E(type="hero", label="Hero Section", icon="maximize", editable=True, defaults={
        "title": "Welcome to Our Site",
        "subtitle": "Discover amazing content and experiences",
        "ctaText": "Get Started",
        "ctaUrl": "#",
        "backgroundImage": "https://picsum.photos/1920/800",
        "overlay": 0.5,
        "alignment": "center",
    }),
    _E(type="card", label="Card", icon="square", editable=True, defaults={
        "image": "https://picsum.photos/400/250",
        "title": "Card Title",
        "description": "This is a sample card description with some text content.",
        "buttonText": "Learn More",
        "buttonUrl": "#",
        "variant": "default",
    }),
    _E(type="testimonial", label="Testimonial", icon="message-square", editable=True, defaults={
        "quote": "This product has completely transformed how we work. Highly recommended!",
        "author": "John Doe",
        "role": "CEO, Company Inc.",
        "avatar": "https://i.pravatar.cc/100",
        "rating": 5,
    }),
    _E(type="cta", label="Call to Action", icon="arrow-up", category="marketing", editable=True, defaults={
        "heading": "Ready to Get Started?",
        "description": "Join thousands of satisfied customers today.",
        "buttonText": "Sign Up Now",
        "buttonUrl": "#",
        "backgroundType": "gradient",
        "backgroundColor": "#3b82f6",
    }),
    _E(type="features", label="Feature Grid", icon="grid", editable=True, defaults={
        "columns": 3,
        "features": [
            {"icon": "🚀", "title": "Fast", "description": "Lightning quick performance"},
            {"icon": "🔒", "title": "Secure", "description": "Enterprise-grade security"},
            {"icon": "💎", "title": "Premium", "description": "High-quality experience"},
        ],
    }),
    _E(type="divider", label="Divider", icon="minus", category="layout", defaults={
        "style": "solid", "spacing": 40, "color": "",
    }),
    _E(type="pricing", label="Pricing Table", icon="grid", category="marketing", defaults={
        "plans": [
            {"name": "Starter", "price": "$9", "period": "/month",
             "features": ["5 Projects", "10GB Storage", "Email Support"],
             "highlighted": False, "buttonText": "Get Started"},
            {"name": "Pro", "price": "$29", "period": "/month",
             "features": ["Unlimited Projects", "100GB Storage", "Priority Support", "API Access"],
             "highlighted": True, "buttonText": "Start Free Trial"},
            {"name": "Enterprise", "price": "$99", "period": "/month",
             "features": ["Everything in Pro", "Unlimited Storage", "24/7 Support", "Custom Integrations"],
             "highlighted": False, "buttonText": "Contact Sales"},
        ],
    }),
    _E(type="stats", label="Stats Counter", icon="grid", defaults={
        "stats": [
            {"value": "10K+", "label": "Active Users", "icon": "👥"},
            {"value": "99.9%", "label": "Uptime", "icon": "⚡"},
            {"value": "150+", "label": "Countries", "icon": "🌍"},
            {"value": "24/7", "label": "Support", "icon": "💬"},
        ],
        "style": "cards",
    }),
    _E(type="timeline", label="Timeline", icon="minus", defaults={
        "items": [
            {"date": "2024", "title": "Company Founded", "description": "Started with a vision to change the world."},
            {"date": "2024", "title": "First Product Launch", "description": "Released our flagship product to market."},
            {"date": "2025", "title": "Series A Funding", "description": "Raised $10M to accelerate growth."},
        ],
        "style": "alternating",
    }),
    _E(type="accordion", label="FAQ Accordion", icon="chevron-right", defaults={
        "items": [
            {"question": "What is your refund policy?", "answer": "We offer a 30-day money-back guarantee on all plans."},
            {"question": "How do I get started?", "answer": "Simply sign up for a free account and follow our onboarding guide."},
            {"question": "Do you offer custom plans?", "answer": "Yes! Contact our sales team for enterprise pricing."},
        ],
        "allowMultiple": False,
    }),
    _E(type="tabs", label="Content Tabs", icon="grid", defaults={
        "tabs": [
            {"label": "Features", "content": "Discover all the amazing features our platform offers."},
            {"label": "Benefits", "content": "Learn how our solution can help your business grow."},
            {"label": "Pricing", "content": "Flexible pricing plans for teams of all sizes."},
        ],
        "style": "pills",
    }),
    _E(type="imageText", label="Image + Text", icon="image", defaults={
        "image": "https://picsum.photos/600/400",
        "title": "Feature Highlight",
        "description": "Describe your amazing feature here with compelling copy that converts visitors into customers.",
        "buttonText": "Learn More",
        "buttonUrl": "#",
        "imagePosition": "left",
        "style": "rounded",
    }),
    _E(type="logoCloud", label="Logo Cloud", icon="grid", category="marketing", defaults={
        "title": "Trusted by Industry Leaders",
        "logos": [
            {"name": f"Company {i}", "url": f"https://via.placeholder.com/120x40?text=Logo+{i}"}
            for i in range(1, 6)
        ],
        "style": "grayscale",
    }),
    _E(type="newsletter", label="Newsletter", icon="message-square", category="marketing", defaults={
        "title": "Stay Updated",
        "description": "Subscribe to our newsletter for the latest news and updates.",
        "buttonText": "Subscribe",
        "placeholder": "Enter your email",
        "style": "inline",
    }),
    _E(type="socialProof", label="Social Proof", icon="star", category="marketing", defaults={
        "type": "reviews",
        "rating": 4.9,
        "reviewCount": 2847,
        "avatars": [f"https://i.pravatar.cc/40?img={i}" for i in range(1, 5)],
        "text": "Join 10,000+ happy customers",
    }),
    _E(type="countdown", label="Countdown Timer", icon="clock", category="marketing",
       relative_dates={"targetDate": 7}, defaults={
        "title": "Launch Coming Soon",
        "style": "cards",
        "showLabels": True,
    }),

    # Structure
    _E(type="row", label="Row / Columns", icon="columns", category="layout", defaults={
        "columns": [
            {"id": "col-1", "width": {"desktop": 6, "tablet": 6, "mobile": 12}, "blocks": []},
            {"id": "col-2", "width": {"desktop": 6, "tablet": 6, "mobile": 12}, "blocks": []},
        ],
        "gap": 24,
        "verticalAlign": "top",
        "horizontalAlign": "left",
    }),
    _E(type="header", label="Header", icon="layout", category="layout", defaults={
        "logo": {"url": "", "width": 120, "position": "left"},
        "style": "default",
        "backgroundColor": "",
        "navItems": [
            _nav("1", "Home", "/"),
            _nav("2", "About", "/about"),
            _nav("3", "Services", "/services"),
            _nav("4", "Contact", "/contact"),
        ],
        "showTopBar": False,
        "topBar": {"phone": "+1 (555) 123-4567", "email": "hello@example.com", "socialLinks": []},
        "ctaButton": {"show": True, "text": "Get Started",
                      "link": {"type": "internal", "url": "/signup"}, "style": "solid"},
        "mobileBreakpoint": "md",
    }),

    # Boutique
    _E(type="productCard", label="Product Card", icon="shopping-bag", category="shop", defaults={
        "product": _product("1", "https://picsum.photos/400/400", "Premium Product", 99.99, 4.5, 128,
                            "/products/premium-product", sale=79.99, badge="Sale"),
        "showRating": True,
        "showBadge": True,
        "buttonStyle": "solid",
    }),
    _E(type="productGrid", label="Product Grid", icon="grid", category="shop", defaults={
        "products": [
            _product("1", "https://picsum.photos/400/400?1", "Product One", 49.99, 4.5, 42, "/products/product-one"),
            _product("2", "https://picsum.photos/400/400?2", "Product Two", 79.99, 5, 128,
                     "/products/product-two", sale=59.99, badge="Sale"),
            _product("3", "https://picsum.photos/400/400?3", "Product Three", 29.99, 4, 18, "/products/product-three"),
            _product("4", "https://picsum.photos/400/400?4", "Product Four", 149.99, 4.8, 256,
                     "/products/product-four", badge="Best Seller"),
        ],
        "columns": 4,
        "showRating": True,
        "buttonStyle": "solid",
    }),
    _E(type="featuredProduct", label="Featured Product", icon="award", category="shop", defaults={
        "product": {
            **_product("1", "https://picsum.photos/800/600", "Featured Product Hero", 199.99, 5, 512,
                       "/products/featured-product", sale=149.99, badge="Featured"),
            "description": "This is our most popular product with amazing features and quality.",
        },
        "layout": "left",
    }),
    _E(type="productCarousel", label="Product Carousel", icon="film", category="shop", defaults={
        "products": [
            _product("1", "https://picsum.photos/400/400?5", "Carousel Item 1", 59.99, 4.5, 32, "/products/carousel-1"),
            _product("2", "https://picsum.photos/400/400?6", "Carousel Item 2", 89.99, 4.8, 64, "/products/carousel-2"),
            _product("3", "https://picsum.photos/400/400?7", "Carousel Item 3", 39.99, 4.2, 21, "/products/carousel-3"),
        ],
        "autoPlay": False,
        "showArrows": True,
    }),

    # Cours / LMS
    _E(type="courseCard", label="Course Card", icon="book", category="course", defaults={
        "course": {
            "id": "1",
            "title": "Complete Web Development Bootcamp",
            "description": "Learn HTML, CSS, JavaScript, React, Node.js and more in this comprehensive course.",
            "image": "https://picsum.photos/600/400?course1",
            "instructor": "John Doe",
            "instructorImage": "https://i.pravatar.cc/150?u=instructor1",
            "duration": "42 hours",
            "lessonCount": 156,
            "price": 99.99,
            "salePrice": 49.99,
            "rating": 4.8,
            "reviewCount": 2450,
            "enrollmentCount": 15000,
            "level": "beginner",
            "category": "Web Development",
            "courseUrl": "/courses/web-development-bootcamp",
        },
        "showInstructor": True,
        "showPrice": True,
        "showRating": True,
    }),
    _E(type="courseGrid", label="Course Grid", icon="grid", category="course", defaults={
        "courses": [
            {"id": "1", "title": "Web Development Bootcamp", "image": "https://picsum.photos/600/400?c1",
             "instructor": "John Doe", "instructorImage": "https://i.pravatar.cc/150?u=i1", "duration": "42h",
             "lessonCount": 156, "price": 99.99, "salePrice": 49.99, "rating": 4.8, "reviewCount": 2450,
             "enrollmentCount": 15000, "level": "beginner", "courseUrl": "/courses/1"},
            {"id": "2", "title": "React Masterclass", "image": "https://picsum.photos/600/400?c2",
             "instructor": "Jane Smith", "instructorImage": "https://i.pravatar.cc/150?u=i2", "duration": "28h",
             "lessonCount": 98, "price": 79.99, "rating": 4.9, "reviewCount": 1820,
             "enrollmentCount": 8500, "level": "intermediate", "courseUrl": "/courses/2"},
            {"id": "3", "title": "Node.js Backend", "image": "https://picsum.photos/600/400?c3",
             "instructor": "Mike Johnson", "instructorImage": "https://i.pravatar.cc/150?u=i3", "duration": "35h",
             "lessonCount": 120, "price": 89.99, "rating": 4.7, "reviewCount": 980,
             "enrollmentCount": 5200, "level": "intermediate", "courseUrl": "/courses/3"},
        ],
        "columns": 3,
        "showFilters": False,
    }),
    _E(type="courseCurriculum", label="Course Curriculum", icon="list", category="course", defaults={
        "modules": [
            {"id": "1", "title": "Getting Started", "duration": "30:00", "lessons": [
                {"id": "1-1", "title": "Welcome to the Course", "type": "video", "duration": "5:00", "isFree": True},
                {"id": "1-2", "title": "Course Overview", "type": "video", "duration": "10:00", "isFree": True},
                {"id": "1-3", "title": "Setting Up Your Environment", "type": "video", "duration": "15:00"},
            ]},
            {"id": "2", "title": "Core Concepts", "duration": "55:00", "lessons": [
                {"id": "2-1", "title": "Understanding the Basics", "type": "video", "duration": "20:00"},
                {"id": "2-2", "title": "Hands-on Practice", "type": "video", "duration": "25:00"},
                {"id": "2-3", "title": "Module Quiz", "type": "quiz", "duration": "10:00"},
            ]},
        ],
        "showDuration": True,
        "showLessonCount": True,
        "expandedByDefault": False,
    }),
    _E(type="courseProgress", label="Course Progress", icon="trending-up", category="course", defaults={
        "progress": {
            "courseId": "1",
            "courseTitle": "Complete Web Development Bootcamp",
            "courseImage": "https://picsum.photos/600/400?progress",
            "progress": 65,
            "completedLessons": 101,
            "totalLessons": 156,
            "lastAccessedLesson": "Building REST APIs",
        },
        "showContinueButton": True,
    }),
    _E(type="courseInstructor", label="Course Instructor", icon="user", category="course", defaults={
        "instructor": {
            "id": "1",
            "name": "Dr. Sarah Johnson",
            "photo": "https://i.pravatar.cc/300?u=instructor",
            "title": "Senior Software Engineer & Educator",
            "bio": ("With over 15 years of experience in software development and 8 years of teaching, "
                    "I've helped over 100,000 students master programming."),
            "rating": 4.9,
            "reviewCount": 12500,
            "courseCount": 12,
            "studentCount": 150000,
            "credentials": ["PhD Computer Science", "AWS Certified", "Google Developer Expert"],
            "socialLinks": [
                {"platform": "twitter", "url": "https://twitter.com/sarahjohnson"},
                {"platform": "linkedin", "url": "https://linkedin.com/in/sarahjohnson"},
                {"platform": "youtube", "url": "https://youtube.com/@sarahjohnson"},
            ],
        },
        "showStats": True,
        "showSocial": True,
    }),
    _E(type="courseCategories", label="Course Categories", icon="folder", category="course", defaults={
        "categories": [
            {"id": "1", "name": "Web Development", "slug": "web-dev", "icon": "💻", "courseCount": 245, "color": "#3B82F6"},
            {"id": "2", "name": "Mobile Development", "slug": "mobile", "icon": "📱", "courseCount": 128, "color": "#10B981"},
            {"id": "3", "name": "Data Science", "slug": "data-science", "icon": "📊", "courseCount": 89, "color": "#8B5CF6"},
            {"id": "4", "name": "Design", "slug": "design", "icon": "🎨", "courseCount": 156, "color": "#F59E0B"},
        ],
        "columns": 4,
        "style": "cards",
    }),

    # E-commerce
    _E(type="shoppingCart", label="Shopping Cart", icon="shopping-cart", category="shop", defaults={
        "cart": {
            "items": [
                {"id": "1", "productId": "p1", "title": "Wireless Headphones",
                 "image": "https://picsum.photos/200/200?cart1", "price": 149.99, "quantity": 1, "variant": "Black"},
                {"id": "2", "productId": "p2", "title": "Smart Watch",
                 "image": "https://picsum.photos/200/200?cart2", "price": 299.99, "quantity": 2, "variant": "Silver"},
            ],
            "subtotal": 749.97,
            "tax": 67.50,
            "shipping": 0,
            "discount": 50,
            "total": 767.47,
            "currency": "$",
        },
        "style": "full",
        "showCheckoutButton": True,
    }),
    _E(type="productCategories", label="Product Categories", icon="folder", category="shop", defaults={
        "categories": [
            {"id": "1", "name": "Electronics", "slug": "electronics", "image": "https://picsum.photos/400/400?cat1", "productCount": 156},
            {"id": "2", "name": "Clothing", "slug": "clothing", "image": "https://picsum.photos/400/400?cat2", "productCount": 324},
            {"id": "3", "name": "Home & Garden", "slug": "home-garden", "image": "https://picsum.photos/400/400?cat3", "productCount": 89},
            {"id": "4", "name": "Sports", "slug": "sports", "image": "https://picsum.photos/400/400?cat4", "productCount": 112},
        ],
        "columns": 4,
        "style": "overlay",
    }),
    _E(type="productFilter", label="Product Filter", icon="filter", category="shop", defaults={
        "showPriceRange": True,
        "showCategories": True,
        "showRating": True,
        "showSort": True,
        "categories": ["Electronics", "Clothing", "Home & Garden", "Sports", "Books"],
        "priceMin": 0,
        "priceMax": 500,
    }),
    _E(type="checkoutSummary", label="Checkout Summary", icon="credit-card", category="shop", defaults={
        "cart": {
            "items": [
                {"id": "1", "productId": "p1", "title": "Premium Headphones",
                 "image": "https://picsum.photos/200/200?checkout1", "price": 199.99, "quantity": 1},
                {"id": "2", "productId": "p2", "title": "Laptop Stand",
                 "image": "https://picsum.photos/200/200?checkout2", "price": 79.99, "quantity": 1},
            ],
            "subtotal": 279.98,
            "tax": 25.20,
            "shipping": 0,
            "discount": 20,
            "total": 285.18,
            "currency": "$",
        },
        "showItems": True,
        "showCoupon": True,
    }),
    _E(type="saleBanner", label="Sale Banner", icon="percent", category="shop",
       relative_dates={"endDate": 3}, defaults={
        "title": "🔥 Black Friday Sale!",
        "subtitle": "Up to 70% off on all products",
        "discountCode": "BLACKFRIDAY",
        "discountText": "SAVE 50%",
        "ctaText": "Shop Now",
        "ctaUrl": "/sale",
        "style": "full",
        "backgroundColor": "#DC2626",
    }),
]

# Ordre d'affichage des catégories dans le menu d'ajout
CATEGORY_LABELS: Dict[str, str] = {
    "content":   "Contenu",
    "media":     "Médias",
    "marketing": "Marketing",
    "layout":    "Structure",
    "shop":      "Boutique",
    "course":    "Cours",
}

REGISTRY = BlockTypeRegistry(_ENTRIES).validate()

EDITABLE_TYPES = frozenset(e.type for e in REGISTRY if e.editable)


def get_registry() -> BlockTypeRegistry:
    return REGISTRY
