from playwright.sync_api import sync_playwright, expect

def run_verification():
    with sync_playwright() as p:
        browser = p.chromium.launch(headless=True)
        page = browser.new_page()

        # Base URL for the Streamlit app (start it with `streamlit run app.py`)
        base_url = "http://localhost:8501"

        # 1. Splash screen, then login after the delay
        page.goto(base_url)
        expect(page.get_by_text("Welcome to my app!")).to_be_visible()
        page.screenshot(path="jules-scratch/verification/01_splash.png")
        expect(page.get_by_label("Username")).to_be_visible(timeout=15000)

        # 2. Login stays disabled while the password is too short
        login_button = page.get_by_role("button", name="Login")
        page.get_by_label("Username").fill("bob")
        page.get_by_label("Username").press("Tab")
        page.get_by_label("Password").fill("pw")
        page.get_by_label("Password").press("Tab")
        page.wait_for_load_state('networkidle')
        expect(login_button).to_be_disabled()
        page.screenshot(path="jules-scratch/verification/02_login_disabled.png")

        # 3. One more character enables it
        page.get_by_label("Password").fill("pwd")
        page.get_by_label("Password").press("Tab")
        page.wait_for_load_state('networkidle')
        expect(login_button).to_be_enabled()
        login_button.click()

        # 4. Main page and back
        expect(page.get_by_text("This is the main page")).to_be_visible()
        page.screenshot(path="jules-scratch/verification/03_main.png")
        page.get_by_role("button", name="Back to login").click()
        expect(page.get_by_label("Username")).to_have_value("")

        # 5. Registration accepts a pattern-valid but impossible date
        page.get_by_role("button", name="Register").click()
        for label, value in [("First Name", "Ada"), ("Last Name", "Lovelace"),
                             ("Date of Birth (mm/dd/yyyy)", "13/45/2020"),
                             ("Email", "ada@example.com"), ("Password", "analytical")]:
            page.get_by_label(label).fill(value)
            page.get_by_label(label).press("Tab")
        page.wait_for_load_state('networkidle')
        register_button = page.get_by_role("button", name="Register")
        expect(register_button).to_be_enabled()
        page.screenshot(path="jules-scratch/verification/04_registration.png")
        register_button.click()
        expect(page.get_by_role("button", name="Login")).to_be_visible()

        browser.close()

if __name__ == "__main__":
    run_verification()
