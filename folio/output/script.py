"""Browser script for the page behaviours.

Mirrors the Python models in ``folio.behaviors`` and reads the same
configuration values, injected as a JSON settings object.
"""

import json

from folio.config import Config


def page_settings(config: Config, phrases: tuple[str, ...]) -> dict:
    tw = config.typewriter
    sc = config.scroll
    return {
        "typewriter": {
            "phrases": list(phrases),
            "forward": tw.forward_delay_ms,
            "backward": tw.backward_delay_ms,
            "hold": tw.hold_ms,
            "jitter": tw.jitter_ms,
            "blink": tw.blink_ms,
        },
        "cursor": {"duration": config.cursor.outline_duration_ms},
        "scroll": {
            "stiffness": sc.stiffness,
            "damping": sc.damping,
            "mass": sc.mass,
            "restDelta": sc.rest_delta,
            "restSpeed": sc.rest_speed,
        },
        "nav": {"threshold": config.navigation.scroll_threshold_px},
        "skillFillLag": config.reveal.skill_fill_lag_s,
        "skillFillDuration": config.reveal.skill_fill_duration_s,
    }


def render_script(config: Config, phrases: tuple[str, ...]) -> str:
    # </ inside a JSON string would close the script element early.
    settings = json.dumps(page_settings(config, phrases), ensure_ascii=False).replace("</", "<\\/")
    return f'''
const SETTINGS = {settings};

// --- Cursor: dot pinned to the pointer, outline animates after it ---
(() => {{
    const dot = document.querySelector(".cursor-dot");
    const outline = document.querySelector(".cursor-outline");
    window.addEventListener("mousemove", (e) => {{
        if (!dot || !outline) return;
        dot.style.left = `${{e.clientX}}px`;
        dot.style.top = `${{e.clientY}}px`;
        outline.animate(
            {{ left: `${{e.clientX}}px`, top: `${{e.clientY}}px` }},
            {{ duration: SETTINGS.cursor.duration, fill: "forwards" }},
        );
    }});
}})();

// --- Typewriter ---
(() => {{
    const el = document.querySelector("[data-typewriter]");
    if (!el) return;
    const cfg = SETTINGS.typewriter;
    let index = 0, chars = 0, reverse = false, caret = true, tick = null;

    const render = () => {{
        el.textContent = cfg.phrases[index].substring(0, chars) + (caret ? "|" : " ");
    }};
    const delay = (base) => Math.max(base, Math.floor(Math.random() * cfg.jitter));
    const schedule = () => {{
        const length = cfg.phrases[index].length;
        if (!reverse && chars === length + 1) {{
            tick = setTimeout(() => {{ reverse = true; schedule(); }}, cfg.hold);
            return;
        }}
        if (reverse && chars === 0) {{
            reverse = false;
            index = (index + 1) % cfg.phrases.length;
        }}
        const base = reverse ? cfg.backward : (chars === cfg.phrases[index].length ? cfg.hold : cfg.forward);
        tick = setTimeout(() => {{
            chars += reverse ? -1 : 1;
            render();
            schedule();
        }}, delay(base));
    }};
    const blink = setInterval(() => {{ caret = !caret; render(); }}, cfg.blink);
    window.addEventListener("pagehide", () => {{ clearTimeout(tick); clearInterval(blink); }});
    render();
    schedule();
}})();

// --- Scroll progress: raw fraction followed by a damped spring ---
(() => {{
    const bar = document.querySelector(".progress-bar");
    if (!bar) return;
    const cfg = SETTINGS.scroll;
    const fraction = () => {{
        const max = document.documentElement.scrollHeight - window.innerHeight;
        return max <= 0 ? 0 : Math.min(1, Math.max(0, window.scrollY / max));
    }};
    let value = fraction(), velocity = 0, target = value, last = null, frame = null;
    const atRest = () => Math.abs(target - value) <= cfg.restDelta && Math.abs(velocity) <= cfg.restSpeed;
    const step = (now) => {{
        let dt = last === null ? 16 : Math.min(64, now - last);
        last = now;
        while (dt > 0) {{
            const h = Math.min(1, dt) / 1000;
            const force = -cfg.stiffness * (value - target) - cfg.damping * velocity;
            velocity += force / cfg.mass * h;
            value += velocity * h;
            dt -= 1;
        }}
        if (atRest()) {{ value = target; velocity = 0; }}
        bar.style.transform = `scaleX(${{value}})`;
        frame = atRest() ? null : requestAnimationFrame(step);
        if (frame === null) last = null;
    }};
    bar.style.transform = `scaleX(${{value}})`;
    window.addEventListener("scroll", () => {{
        target = fraction();
        if (frame !== null) return;
        if (atRest()) {{
            value = target;
            velocity = 0;
            bar.style.transform = `scaleX(${{value}})`;
        }} else {{
            frame = requestAnimationFrame(step);
        }}
    }}, {{ passive: true }});
}})();

// --- Navigation: scrolled flag and menu toggle ---
(() => {{
    const nav = document.querySelector("nav");
    if (!nav) return;
    const links = nav.querySelector(".nav__links");
    const button = nav.querySelector(".menu-btn");
    let scrolled = window.scrollY > SETTINGS.nav.threshold, menuOpen = false;
    const apply = () => {{
        nav.classList.toggle("scrolled", scrolled || menuOpen);
        nav.classList.toggle("menu-open", menuOpen);
        if (links) links.classList.toggle("open", menuOpen);
        if (button) button.setAttribute("aria-expanded", String(menuOpen));
    }};
    window.addEventListener("scroll", () => {{
        scrolled = window.scrollY > SETTINGS.nav.threshold;
        apply();
    }}, {{ passive: true }});
    if (button) button.addEventListener("click", () => {{ menuOpen = !menuOpen; apply(); }});
    nav.querySelectorAll(".nav__links a").forEach((a) => {{
        a.addEventListener("click", () => {{ menuOpen = false; apply(); }});
    }});
    apply();
}})();

// --- Reveal on scroll: one-shot per element ---
(() => {{
    const items = document.querySelectorAll("[data-reveal]");
    const reveal = (el) => {{
        el.classList.add("revealed");
        el.querySelectorAll("[data-fill]").forEach((fill) => {{
            const delay = parseFloat(el.dataset.revealDelay || "0") + SETTINGS.skillFillLag;
            fill.style.transition = `width ${{SETTINGS.skillFillDuration}}s ease-out ${{delay}}s`;
            fill.style.width = `${{fill.dataset.fill}}%`;
        }});
    }};
    if (!("IntersectionObserver" in window)) {{
        items.forEach(reveal);
        return;
    }}
    const observer = new IntersectionObserver((entries) => {{
        entries.forEach((entry) => {{
            if (!entry.isIntersecting) return;
            reveal(entry.target);
            observer.unobserve(entry.target);
        }});
    }});
    items.forEach((el) => observer.observe(el));
}})();

// --- Tilt on hover ---
(() => {{
    document.querySelectorAll("[data-tilt]").forEach((card) => {{
        const maxX = parseFloat(card.dataset.tiltMaxX), maxY = parseFloat(card.dataset.tiltMaxY);
        const scale = parseFloat(card.dataset.tiltScale), perspective = card.dataset.tiltPerspective;
        card.style.transition = `transform ${{card.dataset.tiltSpeed}}ms cubic-bezier(.03,.98,.52,.99)`;
        card.addEventListener("mousemove", (e) => {{
            const r = card.getBoundingClientRect();
            const nx = Math.min(1, Math.max(-1, ((e.clientX - r.left) / r.width) * 2 - 1));
            const ny = Math.min(1, Math.max(-1, ((e.clientY - r.top) / r.height) * 2 - 1));
            card.style.transform = `perspective(${{perspective}}px) rotateX(${{-ny * maxX}}deg) rotateY(${{nx * maxY}}deg) scale3d(${{scale}}, ${{scale}}, ${{scale}})`;
        }});
        card.addEventListener("mouseleave", () => {{
            card.style.transform = `perspective(${{perspective}}px) rotateX(0deg) rotateY(0deg) scale3d(1, 1, 1)`;
        }});
    }});
}})();
'''
