"""Stylesheet for the portfolio page."""

PAGE_CSS = """
:root {
    --primary-color: #7c3aed;
    --secondary-color: #22d3ee;
    --bg: #0b0b14;
    --bg-card: rgba(255, 255, 255, 0.05);
    --border: rgba(255, 255, 255, 0.1);
    --text: #e6edf3;
    --text-dim: #9ca3af;
    --max-width: 1200px;
}
* { margin: 0; padding: 0; box-sizing: border-box; }
html { scroll-behavior: smooth; }
body {
    background: var(--bg);
    color: var(--text);
    font-family: 'Poppins', -apple-system, BlinkMacSystemFont, 'Segoe UI', sans-serif;
    overflow-x: hidden;
    cursor: none;
}
a { color: inherit; text-decoration: none; cursor: none; }
img { max-width: 100%; display: block; }
.icon { display: inline-block; vertical-align: middle; }

/* --- Cursor --- */
.cursor-dot, .cursor-outline {
    position: fixed; top: 0; left: 0;
    transform: translate(-50%, -50%);
    border-radius: 50%;
    z-index: 9999;
    pointer-events: none;
}
.cursor-dot { width: 8px; height: 8px; background: var(--secondary-color); }
.cursor-outline { width: 40px; height: 40px; border: 2px solid rgba(124, 58, 237, 0.6); }
@media (hover: none) { .cursor-dot, .cursor-outline { display: none; } body, a { cursor: auto; } }

/* --- Progress bar --- */
.progress-bar {
    position: fixed; top: 0; left: 0; right: 0;
    height: 4px;
    background: linear-gradient(90deg, var(--primary-color), var(--secondary-color));
    transform-origin: 0%;
    transform: scaleX(0);
    z-index: 1001;
}

/* --- Background blobs --- */
.bg-animation { position: fixed; inset: 0; z-index: -1; overflow: hidden; }
.blob { position: absolute; border-radius: 50%; filter: blur(80px); opacity: 0.35; animation: float 20s infinite alternate; }
.blob-1 { width: 400px; height: 400px; background: var(--primary-color); top: -100px; left: -100px; }
.blob-2 { width: 350px; height: 350px; background: var(--secondary-color); bottom: -80px; right: -80px; animation-delay: -5s; }
.blob-3 { width: 300px; height: 300px; background: #ec4899; top: 40%; left: 45%; animation-delay: -10s; }
@keyframes float {
    0% { transform: translate(0, 0) scale(1); }
    50% { transform: translate(60px, -40px) scale(1.1); }
    100% { transform: translate(-40px, 60px) scale(0.95); }
}

/* --- Navigation --- */
nav { position: fixed; top: 0; width: 100%; z-index: 1000; transition: background 0.3s, box-shadow 0.3s; }
nav.scrolled { background: rgba(11, 11, 20, 0.9); backdrop-filter: blur(10px); box-shadow: 0 4px 20px rgba(0, 0, 0, 0.3); }
.nav__bar { max-width: var(--max-width); margin: auto; padding: 1rem; display: flex; align-items: center; justify-content: space-between; }
.nav__logo { display: flex; align-items: center; gap: 0.5rem; font-weight: 700; font-size: 1.2rem; }
.logo-icon {
    width: 36px; height: 36px; border-radius: 10px;
    display: grid; place-items: center;
    background: linear-gradient(135deg, var(--primary-color), var(--secondary-color));
}
.nav__links { list-style: none; display: flex; gap: 2rem; }
.nav__links a { font-weight: 500; transition: color 0.3s; }
.nav__links a:hover { color: var(--secondary-color); }
.menu-btn { display: none; font-size: 1.5rem; }
.menu-btn .icon-close { display: none; }
nav.menu-open .menu-btn .icon-close { display: inline-block; }
nav.menu-open .menu-btn .icon-menu { display: none; }
@media (max-width: 768px) {
    .menu-btn { display: block; }
    .nav__links {
        position: absolute; top: 100%; left: 0; width: 100%;
        flex-direction: column; align-items: center; gap: 1.5rem;
        padding: 2rem 0;
        background: rgba(11, 11, 20, 0.95);
        transform: translateY(-150%);
        transition: transform 0.4s;
    }
    .nav__links.open { transform: translateY(0); }
}

/* --- Layout --- */
.section__container { max-width: var(--max-width); margin: auto; padding: 5rem 1rem; }
.section__header-wrapper { text-align: center; margin-bottom: 3rem; }
.section__subtitle { color: var(--secondary-color); font-weight: 600; letter-spacing: 2px; text-transform: uppercase; font-size: 0.9rem; }
.section__title { font-size: 2.5rem; margin-top: 0.5rem; }
.text-gradient {
    background: linear-gradient(90deg, var(--primary-color), var(--secondary-color));
    -webkit-background-clip: text; background-clip: text;
    -webkit-text-fill-color: transparent;
}
.glass { background: var(--bg-card); border: 1px solid var(--border); backdrop-filter: blur(10px); }

/* --- Hero --- */
.header__container { min-height: 100vh; display: flex; align-items: center; }
.header__content-wrapper { display: grid; grid-template-columns: 1.2fr 1fr; gap: 3rem; align-items: center; width: 100%; }
.hire-badge {
    display: inline-block; padding: 0.4rem 1rem; margin-bottom: 1rem;
    border-radius: 20px; border: 1px solid var(--secondary-color);
    color: var(--secondary-color); font-size: 0.85rem;
}
.header__greeting { font-size: 1.2rem; color: var(--secondary-color); font-weight: bold; }
.header__name { font-size: 3.5rem; line-height: 1.2; margin: 10px 0; }
.header__name .typewriter { font-size: 0.8em; white-space: pre; }
.header__description { color: var(--text-dim); line-height: 1.7; max-width: 55ch; }
.header__btns { display: flex; gap: 1rem; margin-top: 2rem; flex-wrap: wrap; }
.btn { display: inline-flex; align-items: center; gap: 0.5rem; padding: 0.8rem 1.6rem; border-radius: 30px; font-weight: 600; transition: transform 0.3s; }
.btn:hover { transform: translateY(-3px); }
.btn-primary { background: linear-gradient(90deg, var(--primary-color), var(--secondary-color)); }
.btn-secondary { border: 1px solid var(--border); }
.header__image { position: relative; }
.header__image img { border-radius: 30px; position: relative; z-index: 2; }
.hero-shape {
    position: absolute; inset: 10% -5% -5% 10%; z-index: 1;
    border-radius: 30px;
    background: linear-gradient(135deg, var(--primary-color), var(--secondary-color));
    opacity: 0.5;
}

/* --- About --- */
.about__container { display: grid; grid-template-columns: 1fr 1fr; gap: 4rem; }
.about__image { border-radius: 20px; margin-bottom: 2rem; width: 100%; box-shadow: 0 10px 30px rgba(0, 0, 0, 0.3); }
.skills-wrapper { display: flex; flex-direction: column; gap: 1.5rem; }
.skill-info { display: flex; justify-content: space-between; margin-bottom: 0.5rem; }
.skill-track { height: 8px; border-radius: 4px; background: var(--border); overflow: hidden; }
.skill-progress { height: 100%; width: 0; border-radius: 4px; background: linear-gradient(90deg, var(--primary-color), var(--secondary-color)); }
.timeline-heading { font-size: 1.5rem; margin-bottom: 1.5rem; text-align: center; }
.timeline { position: relative; }
.timeline::before { content: ''; position: absolute; left: 50%; top: 0; bottom: 0; width: 2px; background: var(--border); }
.timeline-item { position: relative; width: 50%; padding: 1rem 2rem; }
.timeline-item.left { left: 0; text-align: right; }
.timeline-item.right { left: 50%; }
.timeline-dot {
    position: absolute; top: 1.5rem; width: 14px; height: 14px; border-radius: 50%;
    background: var(--secondary-color); box-shadow: 0 0 10px var(--secondary-color);
}
.timeline-item.left .timeline-dot { right: -7px; }
.timeline-item.right .timeline-dot { left: -7px; }
.timeline-content { padding: 1.2rem; border-radius: 12px; background: var(--bg-card); border: 1px solid var(--border); }
.timeline-year { color: var(--secondary-color); font-size: 0.9rem; }
.timeline-role { font-size: 1.2rem; margin: 5px 0; }
.timeline-company { color: var(--text-dim); font-size: 0.9rem; }
.timeline-desc { margin-top: 10px; font-size: 0.95rem; }

/* --- Services --- */
.service__grid { display: grid; grid-template-columns: repeat(auto-fit, minmax(250px, 1fr)); gap: 2rem; }
.service__card { padding: 2rem; border-radius: 20px; height: 100%; }
.service__icon { font-size: 2rem; color: var(--secondary-color); margin-bottom: 1rem; }
.service__card h3 { margin-bottom: 0.8rem; }
.service__card p { color: var(--text-dim); line-height: 1.6; }

/* --- Portfolio --- */
.portfolio__grid { display: grid; grid-template-columns: repeat(auto-fit, minmax(300px, 1fr)); gap: 2rem; }
.portfolio__card { position: relative; overflow: hidden; border-radius: 20px; }
.portfolio__card img { width: 100%; height: 250px; object-fit: cover; transition: transform 0.5s; }
.portfolio__card:hover img { transform: scale(1.1); }
.portfolio__overlay {
    position: absolute; inset: auto 0 0 0; padding: 1.5rem;
    background: linear-gradient(transparent, rgba(0, 0, 0, 0.9));
}
.portfolio__tags { display: flex; gap: 10px; margin-top: 10px; }
.portfolio__tag { background: var(--primary-color); padding: 5px 10px; border-radius: 15px; font-size: 0.8rem; font-weight: bold; }

/* --- Contact --- */
.contact__container { text-align: center; }
.contact__lead { margin-top: 1rem; color: var(--text-dim); }
.social__links { display: flex; justify-content: center; gap: 1.5rem; margin-top: 2rem; }
.social__btn {
    width: 50px; height: 50px; border-radius: 50%;
    display: grid; place-items: center;
    border: 1px solid var(--border);
    transition: background 0.3s, transform 0.3s;
}
.social__btn:hover { background: var(--primary-color); transform: translateY(-5px); }
footer { text-align: center; padding: 2rem; color: var(--text-dim); border-top: 1px solid var(--border); }

/* --- Reveal --- */
[data-reveal] {
    transition-property: opacity, transform;
    transition-timing-function: ease-out;
    will-change: opacity, transform;
}
[data-reveal]:not(.revealed) {
    opacity: var(--reveal-opacity, 0);
    transform: translate(var(--reveal-x, 0), var(--reveal-y, 0)) scale(var(--reveal-scale, 1));
}
[data-reveal].revealed { opacity: 1; transform: none; }
[data-tilt] { transform-style: preserve-3d; will-change: transform; }

@media (max-width: 900px) {
    .header__content-wrapper, .about__container { grid-template-columns: 1fr; }
    .timeline::before { left: 7px; }
    .timeline-item, .timeline-item.right { width: 100%; left: 0; text-align: left; padding-left: 2.5rem; }
    .timeline-item.left .timeline-dot, .timeline-item.right .timeline-dot { left: 0; right: auto; }
}
@media (prefers-reduced-motion: reduce) {
    [data-reveal] { transition: none; opacity: 1; transform: none; }
    .blob { animation: none; }
}
"""
