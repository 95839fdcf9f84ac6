"""
Templates de page — liste ordonnée (type, props partielles) → blocs concrets.

expand() : pour chaque entrée, defaults du registry + override fusionné
(l'override gagne, les listes remplacent), id neuf, aucun overlay.
L'ordre de sortie est l'ordre de rendu de la page, de haut en bas.
"""
from typing import Any, Callable, Dict, List

from pydantic import BaseModel, Field

from .blocks.models import Block, new_block_id
from .errors import UnknownTemplateError
from .registry import REGISTRY, BlockTypeRegistry
from .utils import deep_merge


class TemplateEntry(BaseModel):
    type: str
    props: Dict[str, Any] = Field(default_factory=dict)


class PageTemplate(BaseModel):
    id: str
    name: str
    description: str = ""
    icon: str = ""
    blocks: List[TemplateEntry] = Field(default_factory=list)


def expand(
    template: PageTemplate,
    id_factory: Callable[[], str] = new_block_id,
    registry: BlockTypeRegistry = REGISTRY,
) -> List[Block]:
    """Instancie les blocs du template. Deux expansions ne diffèrent que par les ids."""
    blocks = []
    for entry in template.blocks:
        props = deep_merge(registry.default_props(entry.type), entry.props)
        blocks.append(Block(id=id_factory(), type=entry.type, props=props))
    return blocks


def _t(type_: str, **props) -> TemplateEntry:
    return TemplateEntry(type=type_, props=props)


# ── Templates ───────────────────────────────────────────────────────────────

PAGE_TEMPLATES: List[PageTemplate] = [
    PageTemplate(
        id="blank",
        name="Blank Canvas",
        description="Start from scratch with an empty page",
        icon="📄",
    ),
    PageTemplate(
        id="landing",
        name="Landing Page",
        description="Hero, features, testimonials, and CTA",
        icon="🚀",
        blocks=[
            _t("hero", title="Welcome to Our Platform",
               subtitle="Build something amazing with our tools",
               ctaText="Get Started", ctaUrl="#",
               backgroundImage="https://picsum.photos/1200/600"),
            _t("features", title="Why Choose Us", columns=3, features=[
                {"icon": "⚡", "title": "Lightning Fast", "description": "Optimized for speed and performance"},
                {"icon": "🔒", "title": "Secure", "description": "Enterprise-grade security built in"},
                {"icon": "🎨", "title": "Customizable", "description": "Fully customizable to your brand"},
                {"icon": "📱", "title": "Responsive", "description": "Works perfectly on all devices"},
                {"icon": "💬", "title": "24/7 Support", "description": "We're here whenever you need us"},
                {"icon": "📈", "title": "Analytics", "description": "Deep insights into your performance"},
            ]),
            _t("testimonial",
               quote="This platform transformed our business. The results have been incredible!",
               author="Sarah Johnson", role="CEO, TechCorp", avatar="https://i.pravatar.cc/100?1"),
            _t("stats", style="cards", stats=[
                {"value": "10K+", "label": "Happy Users"},
                {"value": "99.9%", "label": "Uptime"},
                {"value": "24/7", "label": "Support"},
                {"value": "50+", "label": "Countries"},
            ]),
            _t("cta", heading="Ready to Get Started?",
               description="Join thousands of satisfied customers today.",
               buttonText="Start Free Trial", buttonUrl="#"),
        ],
    ),
    PageTemplate(
        id="about",
        name="About Page",
        description="Company story, team, and stats",
        icon="👥",
        blocks=[
            _t("hero", title="About Us", subtitle="Our story, our mission, our team",
               ctaText="", backgroundImage="https://picsum.photos/1200/500"),
            _t("imageText", title="Our Story", imagePosition="left",
               image="https://picsum.photos/600/400?1",
               description=("Founded in 2020, we set out to revolutionize the way businesses build "
                            "their online presence. What started as a small team with a big vision has "
                            "grown into a platform trusted by thousands of businesses worldwide.")),
            _t("imageText", title="Our Mission", imagePosition="right",
               image="https://picsum.photos/600/400?2",
               description=("We believe everyone deserves the tools to build something great. Our mission "
                            "is to democratize web development and make professional-grade tools "
                            "accessible to all.")),
            _t("stats", style="minimal", stats=[
                {"value": "50+", "label": "Team Members"},
                {"value": "2020", "label": "Founded"},
                {"value": "10K+", "label": "Customers"},
                {"value": "25", "label": "Countries"},
            ]),
            _t("cta", heading="Want to Join Our Team?",
               description="We're always looking for talented people.",
               buttonText="View Careers", buttonUrl="#", backgroundType="solid"),
        ],
    ),
    PageTemplate(
        id="product",
        name="Product Page",
        description="Featured product showcase with grid",
        icon="🛍️",
        blocks=[
            _t("featuredProduct", layout="horizontal", showBadge=True, product={
                "id": "1", "image": "https://picsum.photos/800/600", "title": "Premium Product Bundle",
                "price": 299.99, "salePrice": 199.99, "rating": 4.9, "reviewCount": 512,
                "badge": "Best Value", "inStock": True,
                "description": "Everything you need in one complete package. Limited time offer!",
            }),
            _t("divider", style="line"),
            _t("productGrid", columns=4, showRating=True, products=[
                {"id": "1", "image": "https://picsum.photos/400/400?10", "title": "Essential Kit",
                 "price": 49.99, "rating": 4.5, "reviewCount": 128, "inStock": True},
                {"id": "2", "image": "https://picsum.photos/400/400?11", "title": "Pro Bundle",
                 "price": 99.99, "salePrice": 79.99, "rating": 4.8, "reviewCount": 256,
                 "badge": "Sale", "inStock": True},
                {"id": "3", "image": "https://picsum.photos/400/400?12", "title": "Starter Pack",
                 "price": 29.99, "rating": 4.2, "reviewCount": 64, "inStock": True},
                {"id": "4", "image": "https://picsum.photos/400/400?13", "title": "Ultimate Edition",
                 "price": 199.99, "rating": 5.0, "reviewCount": 89, "badge": "New", "inStock": True},
            ]),
            _t("testimonial", quote="The quality is outstanding. Best purchase I've made this year!",
               author="Mike Chen", role="Verified Buyer", avatar="https://i.pravatar.cc/100?3"),
            _t("cta", heading="Free Shipping on Orders Over $100",
               description="Plus easy returns within 30 days.",
               buttonText="Shop Now", buttonUrl="#"),
        ],
    ),
    PageTemplate(
        id="blog",
        name="Blog Layout",
        description="Content-focused blog with sidebar",
        icon="📝",
        blocks=[
            _t("hero", title="Our Blog", subtitle="Insights, tips, and stories from our team",
               ctaText="", backgroundImage=""),
            _t("card", image="https://picsum.photos/800/400?20",
               title="Getting Started with Our Platform",
               description=("A comprehensive guide to help you hit the ground running with all "
                            "the tools and features available."),
               buttonText="Read More", buttonUrl="#"),
            _t("card", image="https://picsum.photos/800/400?21",
               title="10 Tips for Better Productivity",
               description="Discover the secrets to maximizing your workflow and getting more done in less time.",
               buttonText="Read More", buttonUrl="#"),
            _t("card", image="https://picsum.photos/800/400?22",
               title="The Future of Web Development",
               description="Explore the trends and technologies shaping the future of how we build for the web.",
               buttonText="Read More", buttonUrl="#"),
            _t("newsletter", title="Subscribe to Our Newsletter",
               description="Get the latest articles and updates delivered to your inbox.",
               buttonText="Subscribe", placeholder="Enter your email", style="inline"),
        ],
    ),
    PageTemplate(
        id="pricing",
        name="Pricing Page",
        description="Pricing tiers with comparison",
        icon="💰",
        blocks=[
            _t("hero", title="Simple, Transparent Pricing", subtitle="Choose the plan that works for you",
               ctaText="", backgroundImage=""),
            _t("pricing", plans=[
                {"name": "Starter", "price": "$0", "period": "forever",
                 "features": ["5 Projects", "10GB Storage", "Community Support", "Basic Analytics"],
                 "buttonText": "Get Started", "highlighted": False},
                {"name": "Pro", "price": "$29", "period": "/month",
                 "features": ["Unlimited Projects", "100GB Storage", "Priority Support",
                              "Advanced Analytics", "Custom Domain", "API Access"],
                 "buttonText": "Start Free Trial", "highlighted": True},
                {"name": "Enterprise", "price": "$99", "period": "/month",
                 "features": ["Everything in Pro", "Unlimited Storage", "Dedicated Support",
                              "Custom Integrations", "SLA", "On-premise Option"],
                 "buttonText": "Contact Sales", "highlighted": False},
            ]),
            _t("accordion", title="Frequently Asked Questions", items=[
                {"question": "Can I change plans later?",
                 "answer": "Yes, you can upgrade or downgrade your plan at any time. Changes take effect immediately."},
                {"question": "Is there a free trial?",
                 "answer": "Yes! The Pro plan includes a 14-day free trial. No credit card required."},
                {"question": "What payment methods do you accept?",
                 "answer": "We accept all major credit cards, PayPal, and bank transfers for annual plans."},
                {"question": "Can I cancel anytime?",
                 "answer": "Absolutely. Cancel anytime with no questions asked. We'll even prorate your refund."},
            ]),
            _t("cta", heading="Still Have Questions?",
               description="Our team is here to help you find the perfect plan.",
               buttonText="Contact Us", buttonUrl="#", backgroundType="solid"),
        ],
    ),
]

_BY_ID: Dict[str, PageTemplate] = {t.id: t for t in PAGE_TEMPLATES}


def get_template(template_id: str) -> PageTemplate:
    try:
        return _BY_ID[template_id]
    except KeyError:
        raise UnknownTemplateError(template_id) from None
